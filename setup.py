#!/usr/bin/env python3
"""
Setup script for the Billboard lyrics analysis pipeline.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
if requirements_path.exists():
    with open(requirements_path) as f:
        requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]
else:
    requirements = [
        'numpy>=1.21.0',
        'pandas>=1.5.0',
        'scikit-learn>=1.0.0',
        'matplotlib>=3.6.0',
        'seaborn>=0.13.0',
        'nltk>=3.6.0',
        'statsmodels>=0.13.0',
        'tqdm>=4.60.0',
    ]

setup(
    name="billboard-lyrics-analysis",
    version="1.0.0",
    author="Billboard Lyrics Team",
    description="Lyric structure and sentiment features for Billboard Hot 100 songs (2000-2023)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["cli"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Information Analysis",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "parquet": ["pyarrow>=10.0.0"],
        "dev": ["pytest>=6.0.0"],
        "all": ["pyarrow>=10.0.0", "pytest>=6.0.0"]
    },
    entry_points={
        "console_scripts": [
            "billboard-lyrics=cli:main",
        ],
    },
    keywords="lyrics analysis, sentiment lexicon, billboard, text mining, PCA",
)
