"""Per-second and overall tail-latency reporting for benchmark runs."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterable, Sequence


def merge_descending(per_thread: Iterable[Sequence[float]]) -> list[float]:
    """Merge per-thread latency lists, each in descending order, into one.

    The result holds every latency from every thread, largest first.
    Every thread must have recorded at least one latency.
    """
    lists = [list(latencies) for latencies in per_thread]
    for index, latencies in enumerate(lists):
        if not latencies:
            raise ValueError(f"thread {index} recorded no latencies")
    return list(heapq.merge(*lists, reverse=True))


def percentile_at(latencies: Sequence[float], fraction: float) -> float:
    """Return the entry at position ``len * fraction`` of a descending list.

    With latencies ordered largest first, ``fraction=0.01`` gives the
    99th-percentile latency.
    """
    if not latencies:
        raise ValueError("no latencies recorded")
    if not 0.0 <= fraction < 1.0:
        raise ValueError("fraction must be in the range [0, 1)")
    return latencies[int(len(latencies) * fraction)]


@dataclass(frozen=True)
class LatencySummary:
    """Tail-latency figures in milliseconds.

    ``avg`` is the middle entry of the ordered latencies.
    """

    max: float
    min: float
    avg: float
    p90: float
    p99: float
    p999: float
    p9999: float


def summarize(latencies: Iterable[float]) -> LatencySummary:
    """Compute the tail-latency summary of a collection of latencies."""
    ordered = sorted(latencies, reverse=True)
    if not ordered:
        raise ValueError("no latencies recorded")
    return LatencySummary(
        max=ordered[0],
        min=ordered[-1],
        avg=ordered[len(ordered) // 2],
        p90=percentile_at(ordered, 0.1),
        p99=percentile_at(ordered, 0.01),
        p999=percentile_at(ordered, 0.001),
        p9999=percentile_at(ordered, 0.0001),
    )


def format_second_report(second: int, total: int, ops: int, summary: LatencySummary) -> str:
    """The progress line printed after each second of the running stage."""
    return (
        f"[YCSB run] {second} sec, total: {total} , ops: {ops}, tail_latency(ms): "
        f"Max={summary.max:.2f}, Min={summary.min:.2f}, Avg={summary.avg:.2f}, "
        f"90%={summary.p90:.2f}, 99%={summary.p99:.2f}, "
        f"99.9%={summary.p999:.2f}, 99.99%={summary.p9999:.2f}"
    )


def format_error_line(ops: int, summary: LatencySummary) -> str:
    """The machine-readable line: ops and the 90/99/99.9/99.99% latencies."""
    return (
        f"{ops}, {summary.p90:.2f}, {summary.p99:.2f}, "
        f"{summary.p999:.2f}, {summary.p9999:.2f}"
    )


def format_total_report(summary: LatencySummary) -> str:
    """The closing report over the whole run, one figure per line."""
    rows = [
        ("Max", summary.max),
        ("Min", summary.min),
        ("Avg", summary.avg),
        ("90%", summary.p90),
        ("99%", summary.p99),
        ("99.9%", summary.p999),
        ("99.99%", summary.p9999),
    ]
    return "\n".join(f"[YCSB] Total tail latency({label}): {value:.2f}ms" for label, value in rows)