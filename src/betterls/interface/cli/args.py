from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from betterls.domain.constants import APP_NAME, APP_VERSION
from betterls.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the betterls CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
        epilog=i18n.t("app.long_description"),
    )

    # --- Target ---
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.path"),
    )

    # --- Output Format ---
    p.add_argument(
        "-j", "--json",
        dest="json_output",
        action="store_true",
        default=None,
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--indent",
        dest="json_indent",
        type=int,
        metavar="N",
        default=None,
        help=i18n.t("cli.args.indent"),
    )

    # --- Configuration ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        metavar="PATH",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "-V", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate parsed arguments into configuration overrides.

    Options the user did not pass map to None and are ignored by the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides.
    """
    overrides: Dict[str, Any] = {
        "path": args.path,
        "json_output": args.json_output,
        "json_indent": args.json_indent,
        "log_file": args.log_file,
        "log_level": None,
    }

    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
