from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
option overrides. Flags that were not given produce no override, so values
from an options file or the defaults stay in effect.
"""

import argparse
from typing import Any, Dict

from routegen.domain.options import CSS_COMPILERS, FILE_SUFFIXES
from routegen.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the routegen CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="routegen",
        description=i18n.t("app.description"),
    )

    # --- Inputs and destination ---
    p.add_argument("routes_file", help=i18n.t("cli.args.routes"))
    p.add_argument(
        "-o", "--output",
        dest="output_folder",
        required=True,
        help=i18n.t("cli.args.output"),
    )
    p.add_argument("--root", default=None, help=i18n.t("cli.args.root"))
    p.add_argument("--options", dest="options_file", default=None, help=i18n.t("cli.args.options"))

    # --- Field aliases ---
    p.add_argument("--name-field", dest="name_field", default=None, help=i18n.t("cli.args.name_field"))
    p.add_argument("--path-field", dest="path_field", default=None, help=i18n.t("cli.args.path_field"))
    p.add_argument(
        "--children-field",
        dest="children_field",
        default=None,
        help=i18n.t("cli.args.children_field"),
    )

    # --- Output kind ---
    p.add_argument("--suffix", choices=FILE_SUFFIXES, default=None, help=i18n.t("cli.args.suffix"))
    p.add_argument("--vue3", action="store_true", help=i18n.t("cli.args.vue3"))
    p.add_argument("--css", choices=CSS_COMPILERS, default=None, help=i18n.t("cli.args.css"))
    p.add_argument("--no-typescript", action="store_true", help=i18n.t("cli.args.no_typescript"))

    # --- Emission rules ---
    p.add_argument("--index", action="store_true", help=i18n.t("cli.args.index"))
    p.add_argument("--parent-folder", action="store_true", help=i18n.t("cli.args.parent_folder"))

    # --- Runtime ---
    p.add_argument("--dry-run", action="store_true", help=i18n.t("cli.args.dry_run"))
    p.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--lang", choices=("en", "zh"), default=None, help=i18n.t("cli.args.lang"))
    p.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into option overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: camelCase option overrides.
    """
    overrides: Dict[str, Any] = {}

    if args.name_field:
        overrides["name"] = args.name_field
    if args.path_field:
        overrides["path"] = args.path_field
    if args.children_field:
        overrides["children"] = args.children_field

    if args.suffix:
        overrides["fileSuffix"] = args.suffix
    if args.vue3:
        overrides["isVue3"] = True
    if args.css:
        overrides["cssCompiler"] = args.css
    if args.no_typescript:
        overrides["isTypeScript"] = False

    if args.index:
        overrides["isIndex"] = True
    if args.parent_folder:
        overrides["parentFolder"] = True

    return overrides
