from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Turns one invocation into one of four actions: print or save the
effective configuration, print the password listing, or run a selection.
The exit code tells the launcher what happened: 0 delivered, 1 failed,
130 cancelled by the user.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from fuzzel_pass.core.pipeline.collaborators import build_collaborators
from fuzzel_pass.core.pipeline.engine import run_selection
from fuzzel_pass.core.pipeline.stages.listing import list_passwords
from fuzzel_pass.core.pipeline.validator import validate_config
from fuzzel_pass.domain.config import get_default_config, load_config, save_config
from fuzzel_pass.domain.constants import EXIT_CANCELLED, EXIT_FAILURE, EXIT_OK
from fuzzel_pass.domain.selection_models import SelectionResult
from fuzzel_pass.infra.fs import get_default_config_path, get_default_log_path, normalize_path
from fuzzel_pass.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from fuzzel_pass.interface.cli import args as cli_args
from fuzzel_pass.utils.i18n import i18n

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv[1:].

    Returns:
        int: Process exit code.
    """
    args = cli_args.build_parser().parse_args(argv)

    log_file = None
    if args.log_file is not None:
        log_file = normalize_path(args.log_file) if args.log_file else get_default_log_path()
    configure_logging(
        LoggingConfig(level="DEBUG" if args.debug else "INFO", log_file=log_file),
        force=True,
    )

    try:
        return _dispatch(args)
    except KeyboardInterrupt:
        logger.warning(i18n.t("cli.status.interrupted"))
        return EXIT_CANCELLED
    finally:
        shutdown_logging()


def _dispatch(args: argparse.Namespace) -> int:
    config_path = normalize_path(args.config_path) if args.config_path else None
    config = _resolve_config(args, config_path)

    if args.dump_config:
        print(json.dumps(config, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        target = config_path or get_default_config_path()
        if not save_config(config, target):
            return _fail(f"cannot write {target}")
        logger.info(i18n.t("cli.status.saved", path=target))
        return EXIT_OK

    collaborators = build_collaborators(config)

    if args.list_only:
        listed = list_passwords(collaborators)
        if not listed.ok:
            return _fail(listed.error)
        print("\n".join(listed.value or []))
        return EXIT_OK

    result = run_selection(
        collaborators,
        path=args.path,
        type_mode=config["type_mode"],
        field_key=args.field_key,
    )
    return _report(result)

# -----------------------------------------------------------------------------
# CONFIGURATION RESOLUTION
# -----------------------------------------------------------------------------

def _resolve_config(args: argparse.Namespace, config_path: Optional[str]) -> Dict[str, Any]:
    """
    Layer command-line overrides over the file (or built-in) configuration
    and normalize the result. Validation warnings are logged, never fatal.
    """
    raw: Dict[str, Any] = get_default_config() if args.use_defaults else load_config(config_path)
    raw.update(cli_args.args_to_overrides(args))

    config, warnings = validate_config(raw)
    for warning in warnings:
        logger.warning(f"Configuration: {warning}")
    return config

# -----------------------------------------------------------------------------
# OUTCOME REPORTING
# -----------------------------------------------------------------------------

def _fail(error: Any) -> int:
    print(i18n.t("cli.errors.failed", error=error), file=sys.stderr)
    return EXIT_FAILURE


def _report(result: SelectionResult) -> int:
    """
    Map a selection result to an exit code.

    Only failures are printed; a cancellation is the user's own choice and
    is logged at INFO level.
    """
    if result.ok:
        status = "cli.status.delivered_type" if result.sink == "type" else "cli.status.delivered_clipboard"
        logger.debug(i18n.t(status, field=result.field_key, path=result.password_id))
        return EXIT_OK

    if result.cancelled:
        logger.info(i18n.t("cli.status.cancelled"))
        return EXIT_CANCELLED

    logger.debug(f"Selection failed: {result.kind.value if result.kind else 'unknown'}")
    return _fail(result.error)


if __name__ == "__main__":
    sys.exit(main())
