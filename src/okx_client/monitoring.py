"""
Request metrics for OKX client.

Tracks per-endpoint latency and outcome for the requests the client sends.
"""

import time
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Deque, Dict, List


@dataclass(frozen=True)
class RequestMetrics:
    """Metrics for a single request."""
    endpoint: str
    method: str
    status_code: int
    duration_ms: float
    timestamp: float

    @property
    def succeeded(self) -> bool:
        return 200 <= self.status_code < 400


@dataclass
class Statistics:
    """Client performance statistics."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    total_duration_ms: float = 0.0
    avg_duration_ms: float = 0.0
    max_duration_ms: float = 0.0

    def update(self, metrics: RequestMetrics) -> None:
        """Update statistics with new request metrics."""
        self.total_requests += 1
        self.total_duration_ms += metrics.duration_ms
        self.avg_duration_ms = self.total_duration_ms / self.total_requests
        self.max_duration_ms = max(self.max_duration_ms, metrics.duration_ms)

        if metrics.succeeded:
            self.successful_requests += 1
        else:
            self.failed_requests += 1


def endpoint_key(method: str, request_path: str) -> str:
    """Group requests by method and path, ignoring the query string."""
    return f"{method.upper()} {request_path.split('?', 1)[0]}"


class PerformanceMonitor:
    """Records request metrics, bounded per endpoint."""

    def __init__(self, max_history: int = 1000):
        self._max_history = max_history
        self._statistics = Statistics()
        self._history: Deque[RequestMetrics] = deque(maxlen=max_history)
        self._by_endpoint: Dict[str, Deque[RequestMetrics]] = defaultdict(
            lambda: deque(maxlen=max_history)
        )

    def record_request(
        self,
        endpoint: str,
        method: str,
        status_code: int,
        duration_ms: float,
    ) -> None:
        """Record metrics for a completed request."""
        metrics = RequestMetrics(
            endpoint=endpoint,
            method=method.upper(),
            status_code=status_code,
            duration_ms=duration_ms,
            timestamp=time.time(),
        )
        self._statistics.update(metrics)
        self._history.append(metrics)
        self._by_endpoint[endpoint_key(method, endpoint)].append(metrics)

    @property
    def statistics(self) -> Statistics:
        """Get current statistics snapshot."""
        return self._statistics

    def get_endpoint_stats(self, endpoint: str, method: str) -> Dict[str, float]:
        """Get count, latency and success rate for one endpoint."""
        requests = self._by_endpoint.get(endpoint_key(method, endpoint))
        if not requests:
            return {"count": 0, "avg_duration_ms": 0.0, "success_rate": 0.0}

        durations = [r.duration_ms for r in requests]
        return {
            "count": len(requests),
            "avg_duration_ms": sum(durations) / len(durations),
            "success_rate": sum(1 for r in requests if r.succeeded) / len(requests),
        }

    def get_recent_requests(self, count: int = 10) -> List[RequestMetrics]:
        """Get most recent requests."""
        return list(self._history)[-count:]

    def reset(self) -> None:
        """Reset all statistics and history."""
        self._statistics = Statistics()
        self._history.clear()
        self._by_endpoint.clear()
