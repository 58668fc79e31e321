"""Page layouts served by the page server, and the render path shared with the CLI."""

from __future__ import annotations

import threading
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError

from . import index
from .dom import INTERACTIVE, Document, Element
from .errors import PageNotFoundError
from .settings import BootstrapSettings

PAGES_FILE = Path(__file__).with_name("pages.yaml")

# Initializers work on the process-wide current document, so one page renders at a time
_render_lock = threading.Lock()


class ElementSpec(BaseModel):
    """One element as written in a page layout."""

    tag: str = Field(..., min_length=1)
    id: str | None = None
    classes: list[str] = Field(default_factory=list)
    attrs: dict[str, str] = Field(default_factory=dict)

    def to_element(self) -> Element:
        return Element(tag=self.tag, id=self.id, classes=list(self.classes), attrs=dict(self.attrs))


class PageLayout(BaseModel):
    """The static markup of a page, before any initializer has run."""

    title: str = ""
    elements: list[ElementSpec] = Field(default_factory=list)


def parse_pages(payload: Mapping[str, Any]) -> dict[str, PageLayout]:
    try:
        return {name: PageLayout.model_validate(body or {}) for name, body in payload.items()}
    except ValidationError as exc:
        raise ValueError("Invalid page layouts") from exc


@lru_cache(maxsize=None)
def _load_default_pages() -> dict[str, PageLayout]:
    return parse_pages(yaml.safe_load(PAGES_FILE.read_text()) or {})


def load_pages(path: Path | None = None) -> dict[str, PageLayout]:
    """Read page layouts from a YAML file (the bundled pages.yaml by default)."""
    if path is None:
        return dict(_load_default_pages())
    return parse_pages(yaml.safe_load(Path(path).read_text()) or {})


def get_layout(name: str, pages: Mapping[str, PageLayout] | None = None) -> PageLayout:
    pages = load_pages() if pages is None else pages
    try:
        return pages[name]
    except KeyError:
        raise PageNotFoundError(name) from None


def build_document(layout: PageLayout, url: str) -> Document:
    """A fresh, still loading, document for layout."""
    return Document(url=url, elements=[spec.to_element() for spec in layout.elements])


def render_page(name: str, url: str | None = None, settings: BootstrapSettings | None = None,
                pages: Mapping[str, PageLayout] | None = None) -> Document:
    """Render page name as the browser would see it once it becomes interactive."""
    layout = get_layout(name, pages)
    document = build_document(layout, url if url is not None else f"/pages/{name}")
    with _render_lock:
        index.start(document, settings)
        document.set_ready_state(INTERACTIVE)
    return document


__all__ = [
    "ElementSpec",
    "PAGES_FILE",
    "PageLayout",
    "build_document",
    "get_layout",
    "load_pages",
    "parse_pages",
    "render_page",
]
