import pytest

from webui.dom import (
    COMPLETE,
    DOM_CONTENT_LOADED,
    INTERACTIVE,
    LOAD,
    Document,
    Element,
    get_document,
    on_dom_ready,
    set_document,
)
from webui.errors import NoDocumentError


@pytest.fixture
def page():
    return Document("/pages/test?a=1", elements=[
        Element("div", classes=["ui", "dropdown"]),
        Element("div", classes=["ui", "dropdown", "language"]),
        Element("button", id="save", classes=["ui", "primary", "button"], attrs={"role": "button"}),
        Element("input", attrs={"type": "checkbox", "name": "agree"}),
        Element("textarea", classes=["js-quick-submit"]),
    ])


def test_gate_fires_immediately_when_already_ready():
    doc = Document("/", ready_state=INTERACTIVE)
    calls = []
    on_dom_ready(lambda: calls.append("ready"), doc)
    assert calls == ["ready"]


def test_gate_fires_immediately_when_complete():
    doc = Document("/", ready_state=COMPLETE)
    calls = []
    on_dom_ready(lambda: calls.append("ready"), doc)
    assert calls == ["ready"]


def test_gate_waits_for_readiness_and_fires_once():
    doc = Document("/")
    calls = []
    on_dom_ready(lambda: calls.append("ready"), doc)
    assert calls == []
    doc.set_ready_state(INTERACTIVE)
    assert calls == ["ready"]
    # spurious readiness signals must not fire it again
    doc.dispatch_event(DOM_CONTENT_LOADED)
    doc.dispatch_event(DOM_CONTENT_LOADED)
    doc.set_ready_state(COMPLETE)
    assert calls == ["ready"]


def test_gate_uses_current_document():
    doc = Document("/")
    set_document(doc)
    calls = []
    on_dom_ready(lambda: calls.append("ready"))
    doc.set_ready_state(COMPLETE)
    assert calls == ["ready"]


def test_gate_without_document_raises():
    with pytest.raises(NoDocumentError):
        on_dom_ready(lambda: None)


def test_get_document_roundtrip():
    doc = Document("/x")
    set_document(doc)
    assert get_document() is doc
    set_document(None)
    with pytest.raises(NoDocumentError):
        get_document()


def test_ready_state_transitions_fire_events_in_order():
    doc = Document("/")
    events = []
    doc.add_event_listener(DOM_CONTENT_LOADED, lambda: events.append("dom"))
    doc.add_event_listener(LOAD, lambda: events.append("load"))
    doc.set_ready_state(COMPLETE)
    assert events == ["dom", "load"]
    doc.set_ready_state(COMPLETE)
    assert events == ["dom", "load"]


def test_ready_state_cannot_go_back_or_be_unknown():
    doc = Document("/", ready_state=INTERACTIVE)
    with pytest.raises(ValueError):
        doc.set_ready_state("loading")
    with pytest.raises(ValueError):
        doc.set_ready_state("ready")
    with pytest.raises(ValueError):
        Document("/", ready_state="ready")


def test_listeners_persist_unless_once_or_removed():
    doc = Document("/")
    calls = []

    def keep():
        calls.append("keep")

    doc.add_event_listener("ping", keep)
    doc.add_event_listener("ping", lambda: calls.append("once"), once=True)
    doc.dispatch_event("ping")
    doc.dispatch_event("ping")
    assert calls == ["keep", "once", "keep"]
    doc.remove_event_listener("ping", keep)
    doc.dispatch_event("ping")
    assert calls == ["keep", "once", "keep"]


def test_dispatch_without_listeners_is_noop():
    Document("/").dispatch_event("nothing")


@pytest.mark.parametrize("url, search", [
    ("/pages/home", ""),
    ("/pages/home?", ""),
    ("/pages/home?a=1&b=2", "?a=1&b=2"),
    ("/pages/home?a=1#top", "?a=1"),
    ("/pages/home#top?a=1", ""),
    ("https://localhost/?_ui_performance_trace=1", "?_ui_performance_trace=1"),
])
def test_location_search(url, search):
    assert Document(url).location_search == search


@pytest.mark.parametrize("selector, count", [
    ("div", 2),
    (".dropdown", 2),
    (".ui.dropdown.language", 1),
    ("#save", 1),
    ("button.ui.primary#save", 1),
    ("[role]", 1),
    ("[role=button]", 1),
    ("[role='link']", 0),
    ('input[type="checkbox"]', 1),
    ("input, textarea", 2),
    ("*", 5),
    ("span", 0),
])
def test_query_selector_all(page, selector, count):
    assert len(page.query_selector_all(selector)) == count


def test_query_selector_returns_first_match(page):
    assert page.query_selector(".dropdown") is page.elements[0]
    assert page.query_selector("table") is None


@pytest.mark.parametrize("selector", ["div > span", "div span", "", "a,,b", "div:hover"])
def test_unsupported_selectors_raise(page, selector):
    with pytest.raises(ValueError):
        page.query_selector_all(selector)


def test_element_bind_is_idempotent():
    el = Element("div")
    el.bind("tooltip")
    el.bind("tooltip")
    el.bind("dropdown")
    assert el.behaviors == ["tooltip", "dropdown"]
    assert el.matches("div")
    assert el.to_dict()["behaviors"] == ["tooltip", "dropdown"]
