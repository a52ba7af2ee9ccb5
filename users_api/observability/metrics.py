from __future__ import annotations

from threading import Lock
from typing import Any


class InMemoryMetrics:
    """Per-status request counts and latency, process-local and lock-guarded.

    Each status code keeps ``[count, sum_ms, max_ms]``; totals are derived
    from those rows when a snapshot is taken.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._by_status: dict[int, list[float]] = {}

    def observe_http_request(self, elapsed_ms: float, status_code: int) -> None:
        with self._lock:
            row = self._by_status.setdefault(status_code, [0, 0.0, 0.0])
            row[0] += 1
            row[1] += elapsed_ms
            row[2] = max(row[2], elapsed_ms)

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            rows = [(code, tuple(row)) for code, row in sorted(self._by_status.items())]

        count = sum(int(row[0]) for _, row in rows)
        return {
            "counters": {
                "http_requests_total": count,
                "http_responses_by_status": {str(code): int(row[0]) for code, row in rows},
            },
            "latency_ms": {
                "http_request_ms": {
                    "count": count,
                    "sum_ms": sum(row[1] for _, row in rows),
                    "max_ms": max((row[2] for _, row in rows), default=0.0),
                },
            },
        }

    def reset(self) -> None:
        with self._lock:
            self._by_status = {}


_METRICS = InMemoryMetrics()


def get_metrics() -> InMemoryMetrics:
    return _METRICS


def reset_metrics() -> None:
    """Forget everything observed so far (used by tests)."""

    _METRICS.reset()
