"""Average sensor temperature with a sparkline, read from ``sensors -j``."""

from __future__ import annotations

import argparse
import json
import subprocess
import sys
from typing import Any

from ruststats.utils import make_sparkline, update_history

HISTORY_PATH = "/tmp/temperature_history.json"
DEFAULT_POINTS = 5

_ICONS = ((25.0, ""), (35.0, ""), (65.0, ""), (75.0, ""))
_HOT_ICON = ""


class SensorsError(RuntimeError):
    """Raised when ``sensors`` cannot be run or reports failure."""


def extract_temperatures(data: Any) -> list[float]:
    """Collect every numeric ``temp*_input`` reading from parsed ``sensors -j`` output."""
    temps: list[float] = []
    if not isinstance(data, dict):
        return temps
    for _chip, entries in sorted(data.items()):
        if not isinstance(entries, dict):
            continue
        for _label, metrics in sorted(entries.items()):
            if not isinstance(metrics, dict):
                continue
            for key, value in sorted(metrics.items()):
                if (
                    key.startswith("temp")
                    and key.endswith("_input")
                    and isinstance(value, (int, float))
                    and not isinstance(value, bool)
                ):
                    temps.append(float(value))
    return temps


def temperature_icon(avg: float) -> str:
    """Icon shown in front of the reading for the given temperature."""
    for limit, icon in _ICONS:
        if avg < limit:
            return icon
    return _HOT_ICON


def run_sensors(chip: str | None = None) -> Any:
    """Run ``sensors -j`` (optionally for one chip) and return the parsed JSON."""
    command = ["sensors", "-j"]
    if chip is not None:
        command.append(chip)
    try:
        result = subprocess.run(command, capture_output=True, check=False)
    except OSError as exc:
        raise SensorsError("`sensors` cmd failed") from exc
    if result.returncode != 0:
        raise SensorsError("Error when running `sensors`")
    try:
        return json.loads(result.stdout)
    except ValueError as exc:
        raise SensorsError("Invalid JSON") from exc


def _count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid count: {text!r}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="temperature", description="Shows sensors avg temperature with ASCII sparkline"
    )
    parser.add_argument("-w", "--warning", metavar="WARN", type=float, default=70.0,
                        help="Warning threshold")
    parser.add_argument("-c", "--critical", metavar="CRIT", type=float, default=90.0,
                        help="Critical threshold")
    parser.add_argument("--chip", metavar="CHIP", default=None,
                        help="Sensor chip (e.g. coretemp-isa-0000)")
    parser.add_argument("-o", "--output", metavar="OUTPUT", default="text_and_sparkline",
                        help="Output format (text, text_and_sparkline)")
    parser.add_argument("-n", "--count", metavar="N", type=_count, default=DEFAULT_POINTS,
                        help="Sparkline length")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Read sensors, update the history and print the status line."""
    args = _parser().parse_args(argv)

    try:
        data = run_sensors(args.chip)
    except SensorsError as exc:
        print(exc, file=sys.stderr)
        return 1

    temps = extract_temperatures(data)
    if not temps:
        print("No temperature sensor available", file=sys.stderr)
        return 1

    avg = sum(temps) / len(temps)
    history = update_history(HISTORY_PATH, avg, args.count)
    spark = make_sparkline(history)
    icon = temperature_icon(avg)

    if args.output == "text":
        print(f"{icon} {int(avg)}°C")
    elif args.output == "text_and_sparkline":
        print(f"{icon} {avg:.1f}°C {spark}")
    else:
        print("Invalid output format", file=sys.stderr)
        return 1

    if avg >= args.critical:
        print("#FF0000")
        return 33
    if avg >= args.warning:
        print("#FFFC00")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())