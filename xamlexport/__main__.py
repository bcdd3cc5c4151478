"""CLI entry point for xaml-export.

Reads a project exported from the design tool as JSON and prints the
generated markup to stdout.

Usage:
    python -m xamlexport colors project.json
    python -m xamlexport labels project.json --ignore-font-family
    python -m xamlexport summary project.json
    python -m xamlexport layer project.json layer.json
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from xamlexport.config import EnvVar, ExportOptions, get_environment
from xamlexport.core import get_logger, setup_logging
from xamlexport.design import Layer, Project
from xamlexport.export import ExportContext, ExportSession
from xamlexport.output import format_registry_tree

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


def _load_session(args: argparse.Namespace) -> ExportSession:
    project = Project.model_validate_json(Path(args.project).read_text())
    overrides = {}
    if args.ignore_font_family:
        overrides["ignore_font_family"] = True
    if args.no_sort:
        overrides["sort_resources"] = False
    if args.duplicate_suffix is not None:
        overrides["duplicate_suffix"] = args.duplicate_suffix
    options = ExportOptions.from_environment(**overrides)
    return ExportSession(ExportContext(project=project, options=options))


def cmd_colors(args: argparse.Namespace) -> int:
    """Print Colors.xaml."""
    print(_load_session(args).export_colors().code, end="")
    return 0


def cmd_labels(args: argparse.Namespace) -> int:
    """Print Labels.xaml."""
    print(_load_session(args).export_text_styles().code, end="")
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    """Print the label style keys as a tree."""
    session = _load_session(args)
    registry = session.build_text_style_registry()
    print(format_registry_tree(registry, title=session.context.project.name or "Labels"))
    return 0


def cmd_layer(args: argparse.Namespace) -> int:
    """Print the snippet for one layer."""
    session = _load_session(args)
    selected = Layer.model_validate_json(Path(args.layer).read_text())
    print(session.layer(selected).code, end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="xamlexport",
        description="Generate XAML resources and snippets from a design project",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: XAML_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_command(name: str, help_text: str, func) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("project", type=Path, help="Project JSON file")
        sub.add_argument(
            "--ignore-font-family",
            action="store_true",
            help="Leave font family out of label styles",
        )
        sub.add_argument(
            "--no-sort",
            action="store_true",
            help="Keep color resources in project order",
        )
        sub.add_argument(
            "--duplicate-suffix",
            default=None,
            help="Name suffix marking duplicate resources",
        )
        sub.set_defaults(func=func)
        return sub

    add_command("colors", "Print Colors.xaml", cmd_colors)
    add_command("labels", "Print Labels.xaml", cmd_labels)
    add_command("summary", "Print label style keys by region", cmd_summary)
    layer_parser = add_command("layer", "Print the snippet for one layer", cmd_layer)
    layer_parser.add_argument("layer", type=Path, help="Layer JSON file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    setup_logging(args.log_level or get_environment(EnvVar.XAML_LOG_LEVEL))

    try:
        return args.func(args)
    except (OSError, ValidationError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
