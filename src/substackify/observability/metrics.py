"""Metrics hook protocol, metric names and the no-op default.

substackify emits counters and timings around API requests and
conversions.  Supply any object with ``increment`` and ``timing`` methods
through ``SubstackifyConfig(metrics=...)`` to route data points to StatsD,
Prometheus, Datadog, etc.  Request metrics are tagged with ``method``,
``route`` (numeric ids collapsed to ``{id}``) and ``status``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

REQUESTS_TOTAL = "substackify.requests_total"
REQUEST_DURATION_MS = "substackify.request_duration_ms"
BLOCKS_CONVERTED_TOTAL = "substackify.blocks_converted_total"


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy."""

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...


class NoopMetricsHook:
    """Metrics backend that discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass


def resolve_metrics(hook: Any | None) -> MetricsHook:
    """Return *hook*, or a :class:`NoopMetricsHook` when it is ``None``.

    Raises
    ------
    TypeError
        If *hook* lacks ``increment`` or ``timing``.
    """
    if hook is None:
        return NoopMetricsHook()
    if not isinstance(hook, MetricsHook):
        raise TypeError(
            f"metrics must provide increment() and timing(), got {type(hook).__name__}"
        )
    return hook
