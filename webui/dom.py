"""
webui.dom
---------
A minimal server-side document model: the elements of a rendered page,
its ready state and its event listeners.

Feature initializers take no arguments, so they work on the *current*
document, set with set_document() before the bundle starts.

on_dom_ready() is the startup gate: it runs a callback once the document
has left the "loading" state, exactly once.
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass, field
from functools import lru_cache
from typing import Any, Callable

from .errors import NoDocumentError

logger = logging.getLogger(__name__)

LOADING = "loading"
INTERACTIVE = "interactive"
COMPLETE = "complete"
READY_STATES = (LOADING, INTERACTIVE, COMPLETE)

DOM_CONTENT_LOADED = "DOMContentLoaded"
LOAD = "load"

Listener = Callable[[], Any]


@dataclass
class Element:
    """One element of a rendered page and the behaviors wired onto it."""

    tag: str
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)
    behaviors: list[str] = field(default_factory=list)

    def matches(self, selector: str) -> bool:
        return any(compound.matches(self) for compound in _compile(selector))

    def bind(self, behavior: str) -> None:
        """Attach a behavior; binding the same behavior twice is a no-op."""
        if behavior not in self.behaviors:
            self.behaviors.append(behavior)

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class _Compound:
    tag: str | None
    ids: tuple[str, ...]
    classes: tuple[str, ...]
    attrs: tuple[tuple[str, str | None], ...]

    def matches(self, element: Element) -> bool:
        if self.tag is not None and element.tag != self.tag:
            return False
        if any(element.id != i for i in self.ids):
            return False
        if any(c not in element.classes for c in self.classes):
            return False
        for name, value in self.attrs:
            if name not in element.attrs:
                return False
            if value is not None and element.attrs[name] != value:
                return False
        return True


_TAG = re.compile(r"\*|[a-zA-Z][\w-]*")
_SIMPLE = re.compile(
    r"\.(?P<cls>[\w-]+)"
    r"|#(?P<id>[\w-]+)"
    r"|\[(?P<attr>[\w-]+)(?:=(?P<q>[\"']?)(?P<val>[^\]\"']*)(?P=q))?\]"
)


@lru_cache(maxsize=256)
def _compile(selector: str) -> tuple[_Compound, ...]:
    """Compile a comma separated list of compound selectors (no combinators)."""
    compounds = []
    for part in selector.split(","):
        part = part.strip()
        if not part:
            raise ValueError(f"Empty selector in {selector!r}")
        tag = None
        pos = 0
        m = _TAG.match(part)
        if m:
            tag = None if m.group(0) == "*" else m.group(0)
            pos = m.end()
        ids, classes, attrs = [], [], []
        while pos < len(part):
            m = _SIMPLE.match(part, pos)
            if m is None:
                raise ValueError(f"Unsupported selector: {part!r}")
            if m.group("cls"):
                classes.append(m.group("cls"))
            elif m.group("id"):
                ids.append(m.group("id"))
            else:
                attrs.append((m.group("attr"), m.group("val")))
            pos = m.end()
        compounds.append(_Compound(tag, tuple(ids), tuple(classes), tuple(attrs)))
    return tuple(compounds)


class Document:
    """A rendered page: location, ready state, elements and listeners."""

    def __init__(self, url: str = "/", elements: list[Element] | None = None, ready_state: str = LOADING):
        if ready_state not in READY_STATES:
            raise ValueError(f"Unknown ready state: {ready_state!r}")
        self.url = url
        self.ready_state = ready_state
        self.elements: list[Element] = list(elements or [])
        self._listeners: dict[str, list[tuple[Listener, bool]]] = {}

    @property
    def location_search(self) -> str:
        """The raw query string including the leading '?', or '' (like location.search)."""
        _, sep, query = self.url.split("#", 1)[0].partition("?")
        return f"?{query}" if sep and query else ""

    def query_selector_all(self, selector: str) -> list[Element]:
        compounds = _compile(selector)
        return [el for el in self.elements if any(c.matches(el) for c in compounds)]

    def query_selector(self, selector: str) -> Element | None:
        found = self.query_selector_all(selector)
        return found[0] if found else None

    def add_event_listener(self, event: str, callback: Listener, once: bool = False) -> None:
        self._listeners.setdefault(event, []).append((callback, once))

    def remove_event_listener(self, event: str, callback: Listener) -> None:
        entries = self._listeners.get(event, [])
        self._listeners[event] = [(cb, once) for cb, once in entries if cb is not callback]

    def dispatch_event(self, event: str) -> None:
        """Call the listeners registered for event, in registration order."""
        entries = list(self._listeners.get(event, []))
        # once-listeners are dropped before they run so a re-dispatch from inside cannot repeat them
        self._listeners[event] = [(cb, once) for cb, once in entries if not once]
        for callback, _ in entries:
            callback()

    def set_ready_state(self, state: str) -> None:
        """Advance the ready state, firing DOMContentLoaded and load on the way."""
        if state not in READY_STATES:
            raise ValueError(f"Unknown ready state: {state!r}")
        previous = self.ready_state
        if READY_STATES.index(state) < READY_STATES.index(previous):
            raise ValueError(f"Ready state cannot go back from {previous!r} to {state!r}")
        if state == previous:
            return
        self.ready_state = state
        logger.debug(f"Document {self.url} ready state {previous} -> {state}")
        if previous == LOADING:
            self.dispatch_event(DOM_CONTENT_LOADED)
        if state == COMPLETE:
            self.dispatch_event(LOAD)


# The document zero-argument initializers act on
_current_document: Document | None = None


def set_document(document: Document | None) -> None:
    global _current_document
    _current_document = document


def get_document() -> Document:
    if _current_document is None:
        raise NoDocumentError()
    return _current_document


def on_dom_ready(callback: Listener, document: Document | None = None) -> None:
    """
    Run callback once the document is no longer loading.

    If the document is already interactive (or complete) the callback runs
    right away, before this function returns. Otherwise it runs on the first
    DOMContentLoaded event and never again.
    """
    doc = document if document is not None else get_document()
    if doc.ready_state == LOADING:
        doc.add_event_listener(DOM_CONTENT_LOADED, callback, once=True)
    else:
        callback()


__all__ = [
    "COMPLETE",
    "DOM_CONTENT_LOADED",
    "Document",
    "Element",
    "INTERACTIVE",
    "LOAD",
    "LOADING",
    "get_document",
    "on_dom_ready",
    "set_document",
]
