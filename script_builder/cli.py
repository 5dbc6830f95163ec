"""
Command-line interface for rendering script documents.

Reads a JSON document describing a C# file and prints the rendered
source, or writes it to a file.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from . import __version__
from .core.config import ConfigManager, get_config_manager
from .core.errors import ScriptBuilderError
from .core.templates import AUTO_GENERATED
from .loader import load_document_file
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

console = Console()
error_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="script-builder",
        description="Render C# source files from JSON definition documents.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("document", metavar="DOCUMENT", help="JSON document to render")
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for the generated script (default: stdout)",
    )
    parser.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for rendering"
    )

    style_group = parser.add_argument_group("formatting")
    style_group.add_argument(
        "--spaces",
        action="store_true",
        help="Indent with spaces instead of tabs",
    )
    style_group.add_argument(
        "--indent-size",
        type=int,
        metavar="N",
        help="Spaces per indentation level when --spaces is used",
    )
    style_group.add_argument(
        "--header",
        action="store_true",
        help="Prepend an <auto-generated> comment header",
    )

    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")
    return parser


def _build_config(args: argparse.Namespace, manager: ConfigManager):
    """Merge config file and command-line overrides."""
    overrides = {}
    if args.spaces:
        overrides["use_tabs"] = False
    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size
    if args.header:
        overrides["header_template"] = AUTO_GENERATED
        overrides["header_context"] = {"source": Path(args.document).name}

    config = manager.get_config(custom_config=overrides, config_file=args.config)
    for warning in manager.validate_config(config):
        logger.warning("Config: %s", warning)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line tool.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = create_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = _build_config(args, get_config_manager())
        script = load_document_file(args.document, config)
        code = script.build()
    except ScriptBuilderError as e:
        error_console.print(f"❌ [red]{escape(str(e))}[/red]", highlight=False)
        logger.debug("Rendering failed", exc_info=True)
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(code, encoding="utf-8")
        except OSError as e:
            error_console.print(
                f"❌ [red]Cannot write {escape(str(output_path))}: {escape(str(e))}[/red]"
            )
            return 1
        console.print(f"✅ [green]Wrote {output_path}[/green]")
        logger.info("Wrote %d characters to %s", len(code), output_path)
    elif console.is_terminal:
        console.print(Syntax(code, "csharp", theme="monokai", line_numbers=False))
    else:
        sys.stdout.write(code)

    return 0


if __name__ == "__main__":
    sys.exit(main())
