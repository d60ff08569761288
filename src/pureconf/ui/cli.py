"""Command-line interface router for pureconf."""

from __future__ import annotations

import argparse
import dataclasses
import importlib
import json
import sys
from collections.abc import Mapping, Sequence
from typing import Any, Final

from pureconf.constants import SOURCE_FORMATS
from pureconf.errors import SettingsError, SourceError
from pureconf.interpreters.describing import describe
from pureconf.interpreters.validating import Invalid, run_validating
from pureconf.observability.logging import configure_logging, get_logger
from pureconf.program.program import Program
from pureconf.settings import resolve_settings
from pureconf.sources.base import Source
from pureconf.sources.flat import FlatSource
from pureconf.sources.layered import LayeredSource
from pureconf.sources.loader import load_sources
from pureconf.ui.render import CLIRenderer, create_renderer

TARGET_SEPARATOR: Final[str] = ":"

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class CLIError(RuntimeError):
    """Typed CLI failure with an explicit process exit code."""

    message: str
    exit_code: int = 2

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse command router for all supported CLI workflows."""

    parser = argparse.ArgumentParser(
        prog="pureconf",
        description=(
            "pureconf: declarative configuration programs.\n\n"
            "Common workflows:\n"
            "  pureconf describe app.config:PROGRAM            List every key a program reads\n"
            "  pureconf check app.config:PROGRAM -s app.toml   Report every missing key\n"
            "  pureconf show app.config:PROGRAM -s app.toml    Print the evaluated value\n"
            "  pureconf keys -s app.properties                 List keys a source provides\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: PURECONF_LOG_LEVEL or WARNING).",
    )
    common.add_argument(
        "--log-json",
        action="store_true",
        default=None,
        help="Emit log records as JSON lines on stderr.",
    )
    common.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Emit machine-readable JSON on stdout.",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Show detailed output.",
    )

    sourced = argparse.ArgumentParser(add_help=False)
    sourced.add_argument(
        "-s",
        "--source",
        dest="sources",
        action="append",
        default=[],
        metavar="FILE",
        help="Configuration file; repeat to layer files, earlier files take precedence.",
    )
    sourced.add_argument(
        "--format",
        dest="source_format",
        choices=SOURCE_FORMATS,
        default=None,
        help="Force the source format instead of detecting it from the file suffix.",
    )
    sourced.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a single dotted key; takes precedence over every file.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    describe_parser = subparsers.add_parser(
        "describe",
        parents=[common],
        help="List every key a program reads, without consulting a source",
    )
    describe_parser.add_argument("target", help="Program reference as module:attribute.")
    describe_parser.set_defaults(handler=_cmd_describe)

    check_parser = subparsers.add_parser(
        "check",
        parents=[common, sourced],
        help="Validate sources against a program and report every failing key",
    )
    check_parser.add_argument("target", help="Program reference as module:attribute.")
    check_parser.set_defaults(handler=_cmd_check)

    show_parser = subparsers.add_parser(
        "show",
        parents=[common, sourced],
        help="Evaluate a program against sources and print the result",
    )
    show_parser.add_argument("target", help="Program reference as module:attribute.")
    show_parser.set_defaults(handler=_cmd_show)

    keys_parser = subparsers.add_parser(
        "keys",
        parents=[common, sourced],
        help="List the flattened dotted keys provided by sources",
    )
    keys_parser.set_defaults(handler=_cmd_keys)

    return parser


# ---------------------------------------------------------------------------
# Entrypoints
# ---------------------------------------------------------------------------


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse argv, route to a command handler, and return process exit code."""

    parser = build_parser()
    namespace = parser.parse_args(list(argv) if argv is not None else None)
    handler = getattr(namespace, "handler", None)
    if not callable(handler):
        parser.print_help(sys.stderr)
        return 2

    try:
        _configure_logging(namespace)
        result = handler(namespace)
    except CLIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code
    return int(result)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_describe(args: argparse.Namespace) -> int:
    target = _require_str(getattr(args, "target", None), "target")
    program = load_program(target)
    description = describe(program)
    lines = [line for line in description.splitlines() if line]

    if _flag(args, "json"):
        _emit_json({"command": "describe", "target": target, "lines": lines})
        return 0

    renderer = _get_renderer(args)
    if not lines:
        renderer.text("(program reads no keys)")
        return 0
    for line in lines:
        renderer.text(line)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    target = _require_str(getattr(args, "target", None), "target")
    program = load_program(target)
    source = _load_source(args)
    result = run_validating(program, source)

    if isinstance(result, Invalid):
        logger.info("check failed", target=target, issue_count=len(result.issues))
        if _flag(args, "json"):
            _emit_json(
                {
                    "command": "check",
                    "target": target,
                    "valid": False,
                    "issues": _issue_payloads(result),
                }
            )
            return 1
        renderer = _get_renderer(args)
        renderer.heading(f"{target}: invalid")
        for issue in result.issues:
            label = issue.message
            if renderer.verbose:
                label = f"{label} ({issue.kind})"
            renderer.fail(label)
        return 1

    if _flag(args, "json"):
        _emit_json({"command": "check", "target": target, "valid": True, "issues": []})
        return 0
    renderer = _get_renderer(args)
    renderer.ok(f"{target}: valid")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    target = _require_str(getattr(args, "target", None), "target")
    program = load_program(target)
    source = _load_source(args)
    result = run_validating(program, source)

    if isinstance(result, Invalid):
        if _flag(args, "json"):
            _emit_json(
                {
                    "command": "show",
                    "target": target,
                    "valid": False,
                    "issues": _issue_payloads(result),
                }
            )
            return 1
        renderer = _get_renderer(args)
        renderer.heading(f"{target}: invalid")
        renderer.items(result.messages)
        return 1

    value = _to_jsonable(result.value)
    if _flag(args, "json"):
        _emit_json({"command": "show", "target": target, "valid": True, "value": value})
        return 0
    renderer = _get_renderer(args)
    renderer.text(json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False))
    return 0


def _cmd_keys(args: argparse.Namespace) -> int:
    source = _load_source(args)
    keys = list(source.keys())

    if _flag(args, "json"):
        _emit_json({"command": "keys", "keys": keys})
        return 0
    renderer = _get_renderer(args)
    for key in keys:
        renderer.text(key)
    return 0


# ---------------------------------------------------------------------------
# Program and source loading
# ---------------------------------------------------------------------------


def load_program(target: str) -> Program[Any]:
    """Resolve ``package.module:attribute`` to a Program.

    The attribute may be a Program or a zero-argument callable returning one;
    dotted attribute paths (``module:Config.PROGRAM``) are followed.
    """

    module_name, separator, attribute = target.partition(TARGET_SEPARATOR)
    if not separator or not module_name or not attribute:
        raise CLIError(f"invalid target {target!r}: expected module:attribute")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise CLIError(f"unable to import {module_name!r}: {exc}") from exc

    resolved: object = module
    for part in attribute.split("."):
        try:
            resolved = getattr(resolved, part)
        except AttributeError as exc:
            raise CLIError(f"{module_name!r} has no attribute {attribute!r}") from exc

    if not isinstance(resolved, Program) and callable(resolved):
        resolved = resolved()
    if not isinstance(resolved, Program):
        raise CLIError(f"{target!r} is not a Program (got {type(resolved).__name__})")
    return resolved


def _load_source(args: argparse.Namespace) -> Source:
    paths = _string_sequence(getattr(args, "sources", ()))
    overrides = _parse_overrides(_string_sequence(getattr(args, "overrides", ())))
    if not paths and not overrides:
        raise CLIError("at least one --source or --set is required")

    layers: list[Source] = []
    if overrides:
        layers.append(FlatSource(overrides, origin="<--set>"))
    if paths:
        try:
            layers.append(load_sources(paths, getattr(args, "source_format", None)))
        except SourceError as exc:
            raise CLIError(str(exc)) from exc
    if len(layers) == 1:
        return layers[0]
    return LayeredSource(*layers)


def _parse_overrides(raw: Sequence[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for item in raw:
        key, separator, value = item.partition("=")
        if not separator or not key.strip():
            raise CLIError(f"invalid --set value {item!r}: expected KEY=VALUE")
        overrides[key.strip()] = value
    return overrides


def _configure_logging(args: argparse.Namespace) -> None:
    cli_overrides = {
        "log_level": getattr(args, "log_level", None),
        "log_json": getattr(args, "log_json", None),
    }
    try:
        settings = resolve_settings(cli_overrides)
    except SettingsError as exc:
        raise CLIError(str(exc)) from exc
    configure_logging(settings.log_level, json_lines=settings.log_json, stream=sys.stderr)


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _emit_json(payload: Mapping[str, object]) -> None:
    """Emit a JSON payload to stdout with deterministic formatting."""

    print(json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False))


def _issue_payloads(result: Invalid) -> list[dict[str, str]]:
    return [
        {"path": issue.path, "kind": str(issue.kind), "message": issue.message}
        for issue in result.issues
    ]


def _get_renderer(args: argparse.Namespace) -> CLIRenderer:
    return create_renderer(verbose=_flag(args, "verbose"))


def _to_jsonable(value: object) -> object:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _to_jsonable(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        return {str(key): _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise CLIError(f"missing required argument: {name}")
    return value.strip()


def _flag(args: argparse.Namespace, name: str) -> bool:
    value = getattr(args, name, False)
    return bool(value)


def _string_sequence(value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence):
        return tuple(item for item in value if isinstance(item, str))
    return ()


__all__ = ["CLIError", "build_parser", "load_program", "run_cli"]
