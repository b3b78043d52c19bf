"""Command-line argument parsing for source-to-llm.

This module defines the command-line interface for source-to-llm,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from source_to_llm import __version__
from source_to_llm.config import DEFAULT_CONFIG_FILENAME


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with source-to-llm's options.
    """
    description = """
    source-to-llm: Prepare a code base as context for Large Language Models (LLMs).

    This tool walks a directory and writes two documents: an ASCII tree of its structure
    and the concatenated text of every non-ignored file, each preceded by a comment naming
    its path. Binary files appear in the tree but not in the contents.

    Filtering:
    - .gitignore rules of the target directory (unless disabled in the configuration)
    - extra gitignore-style patterns from the configuration ("ignores")
    - an optional whitelist of patterns ("only")
    - .git, node_modules and the output files themselves are always ignored
    """

    epilog = f"""
    Examples:
      # Process the current directory with default settings
      source-to-llm

      # Process a project and write the output elsewhere
      source-to-llm /path/to/project --output /tmp/context

      # Use an explicit configuration file
      source-to-llm /path/to/project --config my.config.yaml

      # Create a default {DEFAULT_CONFIG_FILENAME} in the current directory
      source-to-llm --init

      # Print a summary, with token counts for gpt-4
      source-to-llm -s -t gpt-4 /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="source-to-llm",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"source-to-llm {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to process (default: current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help=f"Path to the configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="DIR",
        help="Output directory. Overrides outputDir from the configuration.",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help=f"Create a default {DEFAULT_CONFIG_FILENAME} in the current directory and exit.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print a summary report to stderr.",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model to use for counting tokens in the summary (e.g., gpt-4).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report progress and skipped binary files, not just warnings.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.tokenizer and not args.summary:
        raise ValueError("-t/--tokenizer requires -s/--summary")
