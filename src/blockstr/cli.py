"""Command-line interface for blockstr."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from blockstr.errors import ConfigError

STDIN = "-"
CONFIG_NAME = "blockstr.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    trim_final_newline: bool
    final_newline: bool
    watch: bool
    interval: float
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="blockstr",
        description="Reindent the contents of a multi-line block string literal",
    )
    p.add_argument("input", help="Input file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--trim-final-newline",
        action="store_true",
        default=None,
        help="Drop one trailing newline from the input before reindenting",
    )
    p.add_argument(
        "--final-newline",
        action="store_true",
        default=None,
        help="Terminate the output with a newline",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and rewrite")
    p.add_argument(
        "--interval",
        type=positive_float,
        default=None,
        metavar="SECS",
        help="Watch poll interval in seconds (default: 0.5)",
    )
    p.add_argument("--debug", action="store_true", help="Dump block analysis to stderr")
    return p


def positive_float(s: str) -> float:
    """Parse a strictly positive number of seconds."""
    try:
        value = float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {s}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {s}")
    return value


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}", path) from None


def _config_value(
    config: dict[str, Any], path: Path, section: str, key: str, types: tuple[type, ...]
) -> Any:
    """Return config[section][key] if present, checking its type."""
    table = config.get(section)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"[{section}] must be a table", path, section)
    value = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; keep it out of numeric settings
    if not isinstance(value, types) or (bool not in types and isinstance(value, bool)):
        names = " or ".join(t.__name__ for t in types)
        raise ConfigError(f"expected {names}, got {type(value).__name__}", path, f"{section}.{key}")
    return value


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = None if args.input == STDIN else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)
    source = config_path if config_path is not None else input_dir / CONFIG_NAME

    trim_final_newline = bool(
        _config_value(config, source, "input", "trim_final_newline", (bool,))
    )
    if args.trim_final_newline is not None:
        trim_final_newline = args.trim_final_newline

    final_newline = bool(_config_value(config, source, "output", "final_newline", (bool,)))
    if args.final_newline is not None:
        final_newline = args.final_newline

    interval = 0.5
    cfg_interval = _config_value(config, source, "watch", "interval", (int, float))
    if cfg_interval is not None:
        if cfg_interval <= 0:
            raise ConfigError("interval must be greater than zero", source, "watch.interval")
        interval = float(cfg_interval)
    if args.interval is not None:
        interval = args.interval

    if args.watch and input_file is None:
        raise argparse.ArgumentTypeError("--watch needs an input file, not stdin")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        trim_final_newline=trim_final_newline,
        final_newline=final_newline,
        watch=args.watch,
        interval=interval,
        debug=args.debug,
    )


def read_input(options: CliOptions) -> str:
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def reindent_text(text: str, options: CliOptions) -> str:
    """Apply the newline options around reindent()."""
    from blockstr.debug import dump_layout
    from blockstr.reindent import reindent

    if options.trim_final_newline and text.endswith("\n"):
        text = text[:-1]

    if options.debug:
        dump_layout(text)

    result = reindent(text)
    if options.final_newline and not result.endswith("\n"):
        result += "\n"
    return result


def write_output(result: str, options: CliOptions) -> None:
    if options.output_file:
        options.output_file.write_text(result, encoding="utf-8")
    else:
        sys.stdout.write(result)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, rewrite the output on each modification."""
    assert options.input_file is not None
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(options.interval)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    write_output(reindent_text(read_input(options), options), options)
                    print(f"Reindented {options.input_file}", file=sys.stderr)
                except (OSError, UnicodeDecodeError) as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(options.interval)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        text = read_input(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        write_output(reindent_text(text, options), options)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
