"""
webui.init_runner
-----------------
Runs the page's feature initializers in order and reports how long they took.

Tracing is turned on per page load by adding ``_ui_performance_trace=1`` to
the query string, e.g. ``/?_ui_performance_trace=1`` or
``/?key=value&_ui_performance_trace=1``. The check is a plain substring test
on the raw query string, not a parse, since it runs on every page load.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Iterable, NamedTuple

from .dom import Document, get_document
from .settings import BootstrapSettings

logger = logging.getLogger(__name__)

Initializer = Callable[[], Any]


class TimingSample(NamedTuple):
    name: str
    duration_ms: float


def initializer_name(func: Initializer) -> str:
    return getattr(func, "__name__", None) or repr(func)


def format_duration(duration_ms: float) -> str:
    """Milliseconds with exactly three decimals, never negative."""
    return f"{max(duration_ms, 0.0):.3f}"


def is_trace_enabled(query_string: str, settings: BootstrapSettings | None = None) -> bool:
    settings = settings or BootstrapSettings()
    return settings.trace_flag in query_string


def call_init_functions(
    functions: Iterable[Initializer],
    document: Document | None = None,
    settings: BootstrapSettings | None = None,
    clock: Callable[[], float] = time.perf_counter,
) -> None:
    """
    Call every initializer once, in order.

    In trace mode each call is timed and the slowest ``trace_limit`` are
    logged, slowest first. In both modes an error is logged when the whole
    run took longer than ``slow_threshold_ms``.

    An exception raised by an initializer is not caught: the remaining
    initializers are skipped and the exception reaches the caller.
    """
    functions = tuple(functions)
    settings = settings or BootstrapSettings()
    doc = document if document is not None else get_document()

    init_start = clock()
    if is_trace_enabled(doc.location_search, settings):
        results: list[TimingSample] = []
        for func in functions:
            start = clock()
            func()
            results.append(TimingSample(initializer_name(func), (clock() - start) * 1000))
        results.sort(key=lambda sample: sample.duration_ms, reverse=True)
        for sample in results[:settings.trace_limit]:
            logger.info(f"performance trace: {sample.name} {format_duration(sample.duration_ms)}")
    else:
        for func in functions:
            func()
    init_dur = (clock() - init_start) * 1000
    if init_dur > settings.slow_threshold_ms:
        logger.error(f"slow init functions took {format_duration(init_dur)}ms")


__all__ = [
    "Initializer",
    "TimingSample",
    "call_init_functions",
    "format_duration",
    "initializer_name",
    "is_trace_enabled",
]
