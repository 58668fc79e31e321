"""Server-rendered page bundle: startup gate, initializer runner and feature wiring."""

from .dom import Document, Element, get_document, on_dom_ready, set_document
from .errors import NoDocumentError, PageNotFoundError, WebUIError
from .init_runner import TimingSample, call_init_functions, format_duration, is_trace_enabled
from .settings import BootstrapSettings, load_settings

__all__ = [
    "BootstrapSettings",
    "Document",
    "Element",
    "NoDocumentError",
    "PageNotFoundError",
    "TimingSample",
    "WebUIError",
    "call_init_functions",
    "format_duration",
    "get_document",
    "is_trace_enabled",
    "load_settings",
    "on_dom_ready",
    "set_document",
]
