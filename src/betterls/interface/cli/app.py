from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates a listing: logging bootstrap, configuration resolution
(defaults, saved preferences and CLI overrides), target validation,
collection and a single rendering pass as table or JSON.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from betterls.core.services.collector import collect_entries
from betterls.core.validator import validate_config
from betterls.domain.config import get_config_file, get_default_config, load_config, save_config
from betterls.infra.fs import normalize_path, path_exists
from betterls.infra.logging import LoggingConfig, configure_logging, get_logger
from betterls.interface.cli import args as cli_args
from betterls.interface.cli.render import make_console, print_notice, render_json, render_table
from betterls.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_READ_ERROR = 1
EXIT_PATH_MISSING = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success (including an empty folder), 1 if the target
             cannot be checked, 2 if it does not exist, 130 on interrupt.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration resolution
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf)

    # 3. Logging bootstrap (stderr; stdout carries the listing)
    configure_logging(LoggingConfig(
        level=conf["log_level"],
        console=True,
        log_file=conf["log_file"] or None,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    console = make_console()

    if args.save_config:
        if save_config(conf):
            print(i18n.t("cli.status.config_saved", path=get_config_file()), file=sys.stderr)
        else:
            print_notice(i18n.t("cli.errors.config_not_saved"), console)

    # 4. Target verification
    target = normalize_path(conf["path"])
    logger.debug(f"Listing target: {target}")
    try:
        exists = path_exists(target)
    except OSError as e:
        logger.debug(f"Existence check failed for '{target}': {e}")
        print_notice(i18n.t("cli.errors.read_error"), console)
        return EXIT_READ_ERROR

    if not exists:
        print_notice(i18n.t("cli.errors.path_not_exist"), console)
        return EXIT_PATH_MISSING

    # 5. Collection (once) and rendering
    try:
        records = collect_entries(target)
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted"), file=sys.stderr)
        return EXIT_INTERRUPTED

    if not records:
        print_notice(i18n.t("cli.status.empty"), console)
    elif conf["json_output"]:
        print(render_json(records, indent=conf["json_indent"]))
    else:
        render_table(records, console)

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Overlay CLI values on the base configuration.

    None means "not given on the command line" and never overrides.

    Args:
        base: Configuration from defaults or saved preferences.
        overrides: Values mapped from the command line.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
