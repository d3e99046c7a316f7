"""Span telemetry for service operations.

Off by default, so a traced call costs one ContextVar lookup. With
``--verbose`` each traced operation builds a span tree: auto-finalize
inside ``start_edit`` shows up as a child span. Only the outermost
result carries the tree, under ``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from renamectl.services.result import ServiceResult

log = structlog.get_logger("renamectl.telemetry")

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("_active", default=None)


@dataclass
class Span:
    """One timed operation; nested operations are its children."""

    name: str
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started_ns: int = field(default_factory=time.perf_counter_ns, repr=False)
    finished_ns: int | None = field(default=None, repr=False)

    @property
    def duration_ms(self) -> float:
        if self.finished_ns is None:
            return 0.0
        return (self.finished_ns - self.started_ns) / 1_000_000

    def finish(self) -> None:
        self.finished_ns = time.perf_counter_ns()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def child(self, name: str) -> Span:
        span = Span(name=name)
        self.children.append(span)
        return span

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [c.to_dict() for c in self.children]
        return tree


@contextmanager
def _activated(span: Span) -> Iterator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.finish()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a block as a child of the running traced operation.

    Yields None when telemetry is off or nothing is being traced.
    """
    parent = get_current_span()
    if parent is None:
        yield None
        return
    with _activated(parent.child(name)) as span:
        yield span


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Record a span for each call and attach the tree to the outermost result."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        parent = _active.get()
        span = parent.child(func.__qualname__) if parent is not None else Span(func.__qualname__)
        with _activated(span):
            result = func(*args, **kwargs)

        if isinstance(result, ServiceResult):
            span.annotate("ok", result.ok)
            if result.error_code is not None:
                span.annotate("error", result.error_code)
            if parent is None:
                meta = {**(result.meta or {}), "telemetry": span.to_dict()}
                result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]

        log.debug(
            "span.complete",
            span=span.name,
            duration_ms=round(span.duration_ms, 3),
            **span.annotations,
        )
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn span collection on for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The innermost active span, for manual annotation. None when telemetry is off."""
    if not _enabled.get():
        return None
    return _active.get()
