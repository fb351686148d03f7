from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from fuzzel_pass import __version__
from fuzzel_pass.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fuzzel-pass CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(prog="fuzzel-pass", description=i18n.t("app.description"))
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    selection = p.add_argument_group("selection")
    selection.add_argument("-t", "--type", dest="type_mode", action="store_true", help=i18n.t("cli.args.type"))
    selection.add_argument("-p", "--path", metavar="PASSWORD", help=i18n.t("cli.args.path"))
    selection.add_argument("-f", "--field", dest="field_key", metavar="KEY", help=i18n.t("cli.args.field"))
    selection.add_argument("--list", dest="list_only", action="store_true", help=i18n.t("cli.args.list"))

    config = p.add_argument_group("configuration")
    config.add_argument("--config", dest="config_path", metavar="FILE", help=i18n.t("cli.args.config"))
    config.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    config.add_argument("--store-dir", dest="password_store_dir", metavar="DIR", help=i18n.t("cli.args.store_dir"))

    # Mutually exclusive: both print/persist the effective configuration and exit
    actions = config.add_mutually_exclusive_group()
    actions.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    actions.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save"))

    diagnostics = p.add_argument_group("diagnostics")
    diagnostics.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    diagnostics.add_argument(
        "--log-file",
        nargs="?",
        const="",
        metavar="FILE",
        help=i18n.t("cli.args.log_file"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options that were actually given produce an override, so persisted
    preferences survive when the option is omitted.
    """
    overrides: Dict[str, Any] = {}
    if args.type_mode:
        overrides["type_mode"] = True
    if args.password_store_dir is not None:
        overrides["password_store_dir"] = args.password_store_dir
    return overrides
