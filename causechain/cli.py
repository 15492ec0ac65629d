"""CLI entrypoint: call a target and report the cause chain of whatever it raises."""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path
from typing import Callable

from causechain.common.config_loader import TraversalConfig, load_traversal_config
from causechain.common.constants import EXIT_HARD_FAIL, EXIT_RAISED, EXIT_SUCCESS
from causechain.common.errors import CauseChainError, TargetError
from causechain.common.logging import build_logger, log_event
from causechain.report import log_cause_chain


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="causechain", description=__doc__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect = subparsers.add_parser("inspect", help="call MODULE:CALLABLE and log its cause chain")
    inspect.add_argument("target", help="dotted import path of a zero-argument callable, as module:attr")
    inspect.add_argument("--config", default=None)
    inspect.add_argument("--overlay-config", default=None)
    inspect.add_argument("--include-self", action="store_true")
    inspect.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def resolve_target(spec: str) -> Callable[[], object]:
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise TargetError(f"Target must look like module:callable, got {spec!r}")
    try:
        obj = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetError(f"Cannot import module {module_name!r}") from exc
    except Exception as exc:
        # Module-level code failed while importing; the target was never called.
        raise TargetError(f"Importing module {module_name!r} raised {type(exc).__name__}: {exc}") from exc
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise TargetError(f"{module_name!r} has no attribute {attr_path!r}") from exc
    if not callable(obj):
        raise TargetError(f"Target {spec!r} is not callable")
    return obj


def _load_config(args: argparse.Namespace) -> TraversalConfig | None:
    if args.config is None:
        return None
    overlay = Path(args.overlay_config) if args.overlay_config else None
    return load_traversal_config(Path(args.config), overlay_path=overlay)


def run_inspect(args: argparse.Namespace) -> int:
    logger = build_logger(level=args.log_level)
    try:
        config = _load_config(args)
        target = resolve_target(args.target)
    except CauseChainError as exc:
        log_event(logger, str(exc), target=args.target, event="SETUP_FAIL", status="error", error_code=exc.error_code)
        return EXIT_HARD_FAIL

    log_event(logger, "calling target", target=args.target, event="CALL_START", status="ok")
    try:
        target()
    except Exception as exc:
        log_event(
            logger,
            f"target raised {type(exc).__name__}",
            target=args.target,
            event="RAISED",
            status="error",
            error_type=f"{type(exc).__module__}.{type(exc).__qualname__}",
        )
        try:
            log_cause_chain(logger, exc, include_self=args.include_self, config=config, target=args.target)
        except CauseChainError as chain_exc:
            log_event(
                logger,
                str(chain_exc),
                target=args.target,
                event="CHAIN_FAIL",
                status="error",
                error_code=chain_exc.error_code,
            )
            return EXIT_HARD_FAIL
        return EXIT_RAISED

    log_event(logger, "target returned", target=args.target, event="CALL_END", status="ok")
    return EXIT_SUCCESS


def run_command(args: argparse.Namespace) -> int:
    if args.command == "inspect":
        return run_inspect(args)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except CauseChainError:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
