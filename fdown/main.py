"""
fdown Application Entry Point.

Parses the command line, loads configuration, wires the container and
runs the entry pipeline once.
"""

import argparse
import logging
import os
import sys
from datetime import datetime
from typing import List, Optional

from fdown.core.config import DEFAULT_CONFIG_PATH, AppConfig
from fdown.core.exceptions import FdownError, UsageError
from fdown.services.entry_pipeline import DEFAULT_ENTRY_COUNT, PipelineOptions

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def setup_logging(debug: bool = False) -> None:
    """Configure file and console logging."""
    log_path = os.getenv('LOG_PATH', 'logs')
    os.makedirs(log_path, exist_ok=True)

    today = datetime.now().strftime('%Y-%m-%d')
    log_file = os.path.join(log_path, f'fdown_{today}.log')

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )
    # requests/urllib3 connection chatter
    logging.getLogger('urllib3').setLevel(logging.WARNING)


def positive_int(value: str) -> int:
    """argparse type for a strictly positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'not an integer: {value}')
    if number < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1: {value}')
    return number


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = _ArgumentParser(
        prog='fdown',
        description='fdown - archive images from saved Feedly entries'
    )
    parser.add_argument(
        '--config',
        default=DEFAULT_CONFIG_PATH,
        help='Location of the config file'
    )
    parser.add_argument(
        '--subs',
        action='store_true',
        help='List the subscriptions'
    )
    parser.add_argument(
        '-C', '--category',
        help='Only process entries in this category'
    )
    parser.add_argument(
        '--unsave',
        action='store_true',
        help='Unsave processed entries (requires --category)'
    )
    parser.add_argument(
        '--unsave-partial',
        action='store_true',
        default=None,
        help='With --unsave, unsave stored entries even if a later one fails'
    )
    parser.add_argument(
        '-n', '--count',
        type=positive_int,
        default=DEFAULT_ENTRY_COUNT,
        help=f'Number of saved entries to fetch (default: {DEFAULT_ENTRY_COUNT})'
    )
    parser.add_argument(
        '--target-dir',
        help='Directory images are written to (overrides config)'
    )
    parser.add_argument(
        '--dropbox',
        action='store_true',
        help='Upload images to Dropbox instead of the local directory'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and validate command line arguments.

    Raises:
        UsageError: On invalid arguments.
    """
    args = build_parser().parse_args(argv)
    if args.unsave and args.category is None:
        raise UsageError('--unsave requires --category')
    return args


def build_options(args: argparse.Namespace, config: AppConfig) -> PipelineOptions:
    """Merge command line arguments with configuration."""
    unsave_partial = args.unsave_partial
    if unsave_partial is None:
        unsave_partial = config.unsave_partial

    return PipelineOptions(
        list_subscriptions=args.subs,
        category=args.category,
        unsave=args.unsave,
        count=args.count,
        unsave_partial=unsave_partial
    )


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    config = AppConfig.load(args.config)
    if args.target_dir:
        config = config.model_copy(
            update={'target_dir': os.path.expanduser(args.target_dir)}
        )
    return config


def run(argv: Optional[List[str]] = None) -> int:
    """
    Run fdown once.

    Returns:
        Process exit status.
    """
    from fdown.container import create_container

    try:
        args = parse_args(argv)
    except UsageError as e:
        print(f'fdown: error: {e.message}', file=sys.stderr)
        return EXIT_USAGE

    setup_logging(args.debug)

    try:
        config = load_config(args)
        container = create_container(config, use_dropbox=args.dropbox)
        pipeline = container.entry_pipeline()
        try:
            result = pipeline.run(build_options(args, config))
        finally:
            container.image_store().close()
            container.transport().close()
    except FdownError as e:
        logger.error(f'❌ {e}')
        return EXIT_FAILURE

    if not args.subs:
        logger.info(
            f'🎉 Done: {result.processed_count} images'
            + (', entries unsaved' if result.unsaved else '')
        )
    return EXIT_OK


def main():
    """Console script entry point."""
    sys.exit(run())


if __name__ == '__main__':
    main()
