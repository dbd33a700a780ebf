"""Command-line front door for panecmd.

The program takes no options of its own; argparse only supplies ``--help``
and ``--version``. Everything configurable lives in the config file.
"""

from __future__ import annotations

import argparse

from . import __version__
from .config import DEFAULT_CONFIG_PATH
from .runtime import run_app


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="panecmd",
        description="Dual-pane file manager with an embedded command line.",
        epilog=(
            "Keys: Tab toggles the terminal, Alt+Left/Alt+Right pick a pane, "
            "Ctrl+Q quits. Settings are read from "
            f"{DEFAULT_CONFIG_PATH}."
        ),
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch panecmd in the current directory."""
    parser = build_parser()
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.parse_args(argv)
    run_app()


if __name__ == "__main__":
    main()
