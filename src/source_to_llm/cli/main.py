"""Command-line interface for source-to-llm.

This module ties the configuration, the traversal and the output files together.

Exit Codes:
    0: Successful completion
    1: Runtime or configuration error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Process the current directory
    $ source-to-llm

    # Process a project with an explicit configuration
    $ source-to-llm /path/to/project --config stl.config.yaml
"""

import importlib.util
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import List, Optional

from source_to_llm.cli.argparser import create_parser, validate_args
from source_to_llm.config import DEFAULT_CONFIG_FILENAME, Settings, load_settings, write_default_config
from source_to_llm.exceptions import TokenizerNotAvailableError
from source_to_llm.prompt import export_prompt
from source_to_llm.token_counter import TokenCounter
from source_to_llm.tree_walker.traversal_output import TraversalOutput
from source_to_llm.tree_walker.tree_walker import traverse_directory, validate_root

logger = logging.getLogger("source_to_llm")


class CliFormatter(logging.Formatter):
    """Renders warnings as ``Warning: ...`` and everything else as the bare message."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.ERROR:
            return f"Error: {message}"
        if record.levelno >= logging.WARNING:
            return f"Warning: {message}"
        return message


def configure_logging(verbose: bool = False) -> None:
    """Send the package's log records to stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(CliFormatter())
    logger.handlers = [handler]
    logger.setLevel(logging.INFO if verbose else logging.WARNING)


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing various count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Symlinks: {counts['symlinks']}",
        f"Binary files skipped: {counts['binary']}",
        f"Lines: {counts['lines']}",
        f"Characters: {counts['characters']}",
    ]

    if counts["tokens"] is not None:
        result.insert(5, f"Tokens: {counts['tokens']}")

    return "\n".join(result)


def check_tiktoken_available() -> bool:
    return importlib.util.find_spec("tiktoken") is not None


def summarize(output: TraversalOutput, tokenizer_model: Optional[str] = None) -> str:
    """Count the finished documents and format the summary report."""
    counter = TokenCounter(model=tokenizer_model)
    counter.count(output.structure)
    counter.count(output.contents)
    return format_counts(
        {
            "directories": output.directory_count,
            "files": output.file_count,
            "symlinks": output.symlink_count,
            "binary": output.binary_count,
            "lines": counter.get_total_lines(),
            "tokens": counter.get_total_tokens(),
            "characters": counter.get_total_characters(),
        }
    )


def write_outputs(output: TraversalOutput, settings: Settings) -> None:
    """Write the structure and contents documents into the output directory."""
    settings.structure_path.write_text(output.structure, encoding="utf-8")
    logger.info("Successfully wrote structure to %s", settings.structure_path)
    settings.contents_path.write_text(output.contents, encoding="utf-8")
    logger.info("Successfully wrote contents to %s", settings.contents_path)


def run(directory: Path, settings: Settings, summary: bool = False, tokenizer_model: Optional[str] = None) -> None:
    """Traverse a validated directory and persist the results according to settings."""
    settings.output_dir.mkdir(parents=True, exist_ok=True)

    if settings.export_prompt:
        try:
            export_prompt(settings.output_dir)
        except OSError as e:
            logger.warning("Could not write prompt file: %s", e)

    output = traverse_directory(
        directory,
        settings.filter_config(),
        include_contents_header=settings.include_contents_header,
        reserved_names=settings.reserved_names(),
    )

    write_outputs(output, settings)

    if summary:
        print(summarize(output, tokenizer_model), file=sys.stderr)

    logger.info("Analysis complete.")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the source-to-llm command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime or configuration error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    # argparse exits with 2 on syntax errors and 0 for --version
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        validate_args(args)

        if args.init:
            config_path = write_default_config(Path.cwd() / DEFAULT_CONFIG_FILENAME)
            print(f"Default {config_path.name} created.")
            return

        if args.tokenizer and not check_tiktoken_available():
            raise TokenizerNotAvailableError(
                "Token counting was requested with -t/--tokenizer, but the required tiktoken library is not installed."
            )

        directory = validate_root(args.directory)
        logger.info("Analyzing directory: %s", directory)

        settings = load_settings(args.config)
        if args.output is not None:
            settings = settings.with_output_dir(args.output)
        logger.info("Output directory set to: %s", settings.output_dir)

        run(directory, settings, summary=args.summary, tokenizer_model=args.tokenizer)

    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
