"""Command-line entry point for the shell plugin scaffold.

Usage::

    shell-plugin-new
    python -m plugin_scaffold --plugins-dir ./plugins
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from plugin_scaffold.config import ScaffoldConfig
from plugin_scaffold.prompts import InputCollector
from plugin_scaffold.scaffolder import PluginGenerator, ScaffoldError
from plugin_scaffold.utils import console, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shell-plugin-new",
        description="Scaffold the source files of a new shell plugin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  shell-plugin-new\n"
            "  shell-plugin-new --plugins-dir ./plugins\n"
        ),
    )
    parser.add_argument(
        "--plugins-dir",
        default=None,
        help="Parent directory for the new plugin (default: $PLUGIN_SCAFFOLD_PLUGINS_DIR or ./plugins)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the questionnaire and generate the plugin.

    Returns:
        The process exit code: 0 on success, 1 on a rendering or I/O
        failure, 130 when input is aborted.
    """
    args = build_parser().parse_args(argv)

    config = ScaffoldConfig.from_env()
    if args.plugins_dir:
        config.plugins_dir = Path(args.plugins_dir)

    try:
        answers = InputCollector().collect()
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_error("Aborted.")
        return 130

    generator = PluginGenerator(config)
    try:
        written = generator.generate(answers)
    except ScaffoldError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1
    except OSError as exc:
        print_error(f"Error: could not write plugin files: {escape(str(exc))}")
        return 1

    print_summary_table(
        {escape(path.name): escape(str(path)) for path in written},
        title=f"Plugin '{escape(answers.name)}'",
    )
    print_success(f"Plugin scaffolded in {escape(str(config.plugin_dir(answers.name)))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
