"""Command-line interface for mdexport.

Converts rendered HTML (or a JSON element tree) to vault-flavored Markdown.

Examples
--------
Basic conversion to stdout::

    $ mdexport note.html

With document fields as front matter, written to a file::

    $ mdexport note.html --meta note.yaml --out "Vault/My Note.md"

Rewrite links into the vault::

    $ mdexport note.html --vault-root "/Users/me/Notes/"

Options not given on the command line come from a configuration file
(``--config``, ``$MDEXPORT_CONFIG`` or a discovered ``.mdexport.toml``).

"""

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from mdexport.api import load_metadata, to_markdown
from mdexport.cli.config import load_config_with_priority, merge_configs
from mdexport.exceptions import (
    ConfigError,
    FileError,
    MdExportError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdexport.logging_utils import configure_logging
from mdexport.options.markdown import MarkdownExportOptions
from mdexport.utils.io_utils import write_content

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def _field_help(name: str) -> str:
    for option_field in fields(MarkdownExportOptions):
        if option_field.name == name:
            return option_field.metadata.get("help", "")
    return ""


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdexport",
        description="Convert rendered wiki HTML or element trees to vault-flavored Markdown.",
    )
    parser.add_argument("input", help="HTML file, JSON element tree file, or '-' for HTML on stdin")
    parser.add_argument("--meta", metavar="FILE", help="YAML, JSON or TOML file with the document's fields")
    parser.add_argument("--out", "-o", metavar="FILE", help="Output file (default: stdout)")
    parser.add_argument("--config", metavar="FILE", help="Configuration file (TOML, YAML or JSON)")
    parser.add_argument("--vault-root", dest="vault_root", metavar="PATH", help=_field_help("vault_root"))
    parser.add_argument(
        "--category-tag",
        dest="category_tags",
        action="append",
        metavar="TAG",
        help=_field_help("category_tags") + " (repeatable, replaces the default vocabulary)",
    )
    parser.add_argument(
        "--no-collapse-blank-lines",
        dest="collapse_blank_lines",
        action="store_false",
        default=None,
        help="Keep runs of blank lines in the output",
    )
    parser.add_argument("--strict", action="store_true", default=None, help=_field_help("strict"))
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose log format with timestamps and logger names")
    return parser


def build_options(args: argparse.Namespace, config: dict[str, Any]) -> MarkdownExportOptions:
    """Combine configuration file values with command-line overrides.

    Raises
    ------
    ValidationError
        If the resulting options are invalid

    """
    overrides = {
        name: getattr(args, name)
        for name in ("vault_root", "category_tags", "collapse_blank_lines", "strict")
        if getattr(args, name) is not None
    }
    merged = merge_configs(config, overrides)
    try:
        return MarkdownExportOptions.from_mapping(merged)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid options: {e}", parameter_value=merged, original_error=e) from e


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return an exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        config = load_config_with_priority(args.config)
        options = build_options(args, config)
        metadata = load_metadata(args.meta) if args.meta else None

        source: Union[str, Path] = sys.stdin.read() if args.input == "-" else Path(args.input)
        markdown = to_markdown(source, metadata=metadata, options=options)

        if args.out:
            try:
                write_content(markdown, args.out)
            except OSError as e:
                raise OutputWriteError(args.out, original_error=e) from e
            logger.info("Wrote %s", args.out)
        else:
            sys.stdout.write(markdown)
    except (ValidationError, ConfigError) as e:
        logger.error(e.message)
        return EXIT_VALIDATION_ERROR
    except FileError as e:
        logger.error(e.message)
        return EXIT_FILE_ERROR
    except ParsingError as e:
        logger.error(e.message)
        return EXIT_PARSING_ERROR
    except RenderingError as e:
        logger.error(e.message)
        return EXIT_RENDERING_ERROR
    except MdExportError as e:
        logger.error(e.message)
        return EXIT_ERROR
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=args.trace)
        return EXIT_ERROR

    return EXIT_SUCCESS


__all__ = ["create_parser", "build_options", "main"]
