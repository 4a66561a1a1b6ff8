#!/usr/bin/env python3
"""
Billboard Lyrics Command Line Interface

Runs the lyrics feature pipeline, prints the feature table and manages
configuration files.
"""

import argparse
import copy
import sys
import logging
import json
from pathlib import Path
from typing import Optional

import pandas as pd

from billboard_lyrics import Pipeline, config, Config


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration."""
    log_level = getattr(logging, level.upper())

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )


def load_config(args) -> Config:
    """Load the configuration file (if any) and apply CLI overrides."""
    config_obj = Config.from_file(args.config) if args.config else copy.deepcopy(config)

    if getattr(args, 'lexicon', None):
        config_obj.lexicon.source = 'csv'
        config_obj.lexicon.lexicon_path = args.lexicon
    if getattr(args, 'no_download', False):
        config_obj.lexicon.allow_download = False

    return config_obj


def cmd_run(args):
    """Run the full pipeline and render the figures."""
    print("🎵 Running lyrics pipeline...")

    config_obj = load_config(args)
    pipeline = Pipeline(config_obj)
    result = pipeline.run_full_pipeline(
        input_path=args.input,
        output_dir=args.output,
        render=not args.no_plots,
    )

    print(f"\n✅ Pipeline completed in {result['duration']}")
    print(f"  Songs loaded: {result['songs_loaded']}")
    print(f"  Songs with features: {result['songs_with_features']}")

    pca = result['analysis'].get('pca')
    if pca:
        variance = pca['variance_percent']
        print(f"  PC1 variance explained: {variance[0]:.1f}%")
        if len(variance) > 1:
            print(f"  PC2 variance explained: {variance[1]:.1f}%")

    if result['figures']:
        print("\n🖼️  Figures:")
        for name, path in result['figures'].items():
            print(f"  {name}: {path}")

    if args.summary:
        print("\n📊 Analysis summary:")
        print(json.dumps(result['analysis'], indent=2))


def cmd_features(args):
    """Build and print the feature table."""
    config_obj = load_config(args)
    pipeline = Pipeline(config_obj)
    features = pipeline.build_features(args.input)

    print(f"📊 Feature table: {len(features)} songs "
          f"({len(pipeline.songs) - len(features)} dropped without words)")

    with pd.option_context('display.max_columns', None, 'display.width', 160):
        print(features.head(args.limit).to_string(index=False))
        print("\nSummary:")
        print(features.drop(columns=['song_id']).describe().transpose())


def cmd_config(args):
    """Manage configuration."""
    config_obj = Config.from_file(args.config) if args.config else config

    if args.action == 'show':
        print("⚙️  Current Configuration:")
        print("=" * 50)

        print(f"\n📁 Data Settings:")
        print(f"  Input: {config_obj.data.input_path}")
        print(f"  Year column: {config_obj.data.year_column}")
        print(f"  Lyrics column: {config_obj.data.lyrics_column}")
        print(f"  Figures dir: {config_obj.data.figures_dir}")

        print(f"\n🧹 Cleaning Settings:")
        print(f"  Remove annotations: {config_obj.cleaning.remove_annotations}")
        print(f"  Expand contractions: {config_obj.cleaning.expand_contractions}")
        print(f"  Replace non-ASCII: {config_obj.cleaning.replace_non_ascii}")

        print(f"\n📖 Lexicon Settings:")
        print(f"  Source: {config_obj.lexicon.source}")
        print(f"  Path: {config_obj.lexicon.lexicon_path}")
        print(f"  Allow download: {config_obj.lexicon.allow_download}")

        print(f"\n📈 Analysis Settings:")
        print(f"  PCA features: {', '.join(config_obj.analysis.pca_features)}")
        print(f"  Components kept: {config_obj.analysis.n_components}")

    elif args.action == 'create':
        output_path = Path(args.output)
        config_obj.save(str(output_path))
        print(f"✅ Configuration saved to: {output_path}")

    elif args.action == 'validate':
        config_path = Path(args.file)
        if not config_path.exists():
            print(f"❌ Configuration file not found: {config_path}")
            return 1

        try:
            Config.from_file(str(config_path))
            print(f"✅ Configuration file is valid: {config_path}")
        except (ValueError, TypeError) as e:
            print(f"❌ Configuration file is invalid: {e}")
            return 1

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Billboard Hot 100 Lyrics Analysis CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the full pipeline and render the figures
  python cli.py run --input billboard_24years_lyrics_spotify.csv --output figures/

  # Print the feature table using a custom lexicon
  python cli.py features --input songs.csv --lexicon my_lexicon.csv

  # Write the default configuration to a file
  python cli.py config create --output config.json
        """
    )

    # Global arguments
    parser.add_argument('--config', type=str, help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default='INFO', help='Logging level')
    parser.add_argument('--log-file', type=str, help='Log file path')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Run command
    run_parser = subparsers.add_parser('run', help='Run the full pipeline')
    run_parser.add_argument('--input', type=str, help='Song table (CSV or parquet)')
    run_parser.add_argument('--output', type=str, help='Output directory for figures')
    run_parser.add_argument('--lexicon', type=str, help='Sentiment lexicon CSV (word,sentiment)')
    run_parser.add_argument('--no-download', action='store_true',
                            help='Do not download the NLTK opinion lexicon if missing')
    run_parser.add_argument('--no-plots', action='store_true', help='Skip rendering figures')
    run_parser.add_argument('--summary', action='store_true', help='Print the analysis summary as JSON')
    run_parser.set_defaults(func=cmd_run)

    # Features command
    features_parser = subparsers.add_parser('features', help='Print the per-song feature table')
    features_parser.add_argument('--input', type=str, help='Song table (CSV or parquet)')
    features_parser.add_argument('--lexicon', type=str, help='Sentiment lexicon CSV (word,sentiment)')
    features_parser.add_argument('--no-download', action='store_true',
                                 help='Do not download the NLTK opinion lexicon if missing')
    features_parser.add_argument('--limit', type=int, default=10, help='Number of rows to print')
    features_parser.set_defaults(func=cmd_features)

    # Config command
    config_parser = subparsers.add_parser('config', help='Manage configuration')
    config_subparsers = config_parser.add_subparsers(dest='action', help='Configuration actions')

    config_subparsers.add_parser('show', help='Show current configuration')

    config_create = config_subparsers.add_parser('create', help='Create configuration file')
    config_create.add_argument('--output', type=str, required=True, help='Output configuration file path')

    config_validate = config_subparsers.add_parser('validate', help='Validate configuration file')
    config_validate.add_argument('--file', type=str, required=True, help='Configuration file to validate')

    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == 'config' and not args.action:
        parser.parse_args(['config', '--help'])

    # Setup logging
    setup_logging(args.log_level, args.log_file)

    # Execute command
    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\n⚠️  Operation interrupted by user")
        return 130
    except Exception as e:
        print(f"❌ Error: {e}")
        if args.log_level == 'DEBUG':
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
