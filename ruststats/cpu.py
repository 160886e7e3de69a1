"""CPU usage monitor for i3blocks/i3status using /proc/stat."""

from __future__ import annotations

import argparse
import os
import re
import sys
import time

from ruststats.utils import make_sparkline, update_history

PROC_STAT_PATH = "/proc/stat"
HISTORY_PATH = "/tmp/cpu_usage_history.json"
DEFAULT_POINTS = 20
SAMPLE_INTERVAL = 0.1

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_counter(text: str) -> int:
    if _UNSIGNED.fullmatch(text):
        value = int(text)
        if value < 2**64:
            return value
    return 0


def read_proc_stat(path: str | os.PathLike = PROC_STAT_PATH) -> tuple[int, int] | None:
    """Return ``(total, idle)`` CPU time from the aggregate ``cpu`` line, or None."""
    try:
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                if not line.startswith("cpu "):
                    continue
                fields = line.split()
                if len(fields) < 5:
                    return None
                user, nice, system, idle = (_parse_counter(f) for f in fields[1:5])
                return user + nice + system + idle, idle
    except OSError:
        return None
    return None


def cpu_usage(first: tuple[int, int], second: tuple[int, int]) -> float:
    """Percentage of non-idle time between two ``(total, idle)`` snapshots."""
    delta_total = second[0] - first[0]
    delta_idle = second[1] - first[1]
    if delta_total <= 0:
        return 0.0
    return 100.0 * (delta_total - delta_idle) / delta_total


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
        prog="cpu", description="CPU usage monitor for i3blocks/i3status using /proc/stat"
    )
    parser.add_argument("-w", "--warning", metavar="WARN", type=float, default=70.0,
                        help="Warning threshold")
    parser.add_argument("-c", "--critical", metavar="CRIT", type=float, default=90.0,
                        help="Critical threshold")
    parser.add_argument("-o", "--output", metavar="OUTPUT", default="text_and_sparkline",
                        help="Output format (text, text_and_sparkline)")
    parser.add_argument("-n", "--count", metavar="N", type=_count, default=DEFAULT_POINTS,
                        help="Sparkline length")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Sample CPU usage, update the history and print the status line."""
    args = _parser().parse_args(argv)

    first = read_proc_stat(PROC_STAT_PATH)
    if first is None:
        print("Error reading /proc/stat", file=sys.stderr)
        return 0
    time.sleep(SAMPLE_INTERVAL)
    second = read_proc_stat(PROC_STAT_PATH)
    if second is None:
        print("Error reading /proc/stat", file=sys.stderr)
        return 0

    usage = cpu_usage(first, second)
    history = update_history(HISTORY_PATH, usage, args.count)
    spark = make_sparkline(history)

    if args.output == "text":
        print(f"{max(0, min(255, int(usage)))}%")
    elif args.output == "text_and_sparkline":
        print(f"{usage:.1f}% {spark}")
    else:
        print("Invalid output format", file=sys.stderr)
        return 1

    if usage >= args.critical:
        print("#FF0000")
        return 33
    if usage >= args.warning:
        print("#FFFC00")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())