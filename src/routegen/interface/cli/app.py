from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates a CLI run: logging bootstrap, layering of option sources
(defaults, options file, command-line overrides), generation, and rendering
of the result as a human summary or JSON.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from routegen.core.generator import generate
from routegen.core.validator import validate_options
from routegen.domain.errors import RouteGenError
from routegen.domain.result_models import GenerationResult
from routegen.infra.loaders import load_options, load_routes
from routegen.infra.logging import LoggingConfig, configure_logging, get_logger
from routegen.interface.cli import args as cli_args
from routegen.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED_TARGETS = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the routegen CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 if any target failed, 2 on invalid input,
             130 when interrupted.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.lang:
        i18n.load_locale(args.lang)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving options...")

    try:
        raw_options = _merge_options(
            load_options(args.options_file) if args.options_file else {},
            cli_args.args_to_overrides(args),
        )
        options = validate_options(raw_options)

        if args.dump_config:
            print(json.dumps(options.to_dict(), ensure_ascii=False, indent=2))
            return EXIT_OK

        routes = load_routes(args.routes_file)
        result = generate(
            args.output_folder,
            routes,
            raw_options,
            root=args.root,
            dry_run=bool(args.dry_run),
        )
    except RouteGenError as e:
        msg = i18n.t("cli.errors.invalid_input", error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILED_TARGETS

    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILED_TARGETS

# -----------------------------------------------------------------------------
# OPTION MERGING
# -----------------------------------------------------------------------------

def _merge_options(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge: command-line overrides win over the options file."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult) -> None:
    """Print counts and target paths grouped by outcome."""
    print(i18n.t("cli.status.done", root=result.output_root))
    if result.dry_run:
        print(i18n.t("cli.status.dry_run"))

    groups = (
        ("cli.status.created", result.created),
        ("cli.status.planned", result.planned),
        ("cli.status.skipped", result.skipped),
        ("cli.status.failed", result.failed),
    )
    for key, outcomes in groups:
        if not outcomes:
            continue
        print(i18n.t(key, count=len(outcomes)))
        for outcome in outcomes:
            detail = f" ({outcome.reason})" if outcome.reason else ""
            print(f"  - {outcome.file_path}{detail}")


if __name__ == "__main__":
    sys.exit(main())
