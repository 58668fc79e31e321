"""Initializers that run as soon as the bundle starts, before the document is ready."""

from ..dom import get_document
from . import wire


def init_fomantic():
    wire("body", "fomantic")


def init_dir_auto():
    # text inputs follow the direction of what the user types unless the template set one
    for el in get_document().query_selector_all("input, textarea"):
        if el.attrs.get("type", "text") in ("text", "search") or el.tag == "textarea":
            if "dir" not in el.attrs:
                el.set_attribute("dir", "auto")
            el.bind("dir-auto")


def init_submit_event_polyfill():
    wire("form", "submit-polyfill")
