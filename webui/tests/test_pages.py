import logging

import pytest

from webui.dom import INTERACTIVE, LOADING
from webui.errors import PageNotFoundError
from webui.pages import build_document, get_layout, load_pages, parse_pages, render_page


def behaviors(document):
    return {b for el in document.elements for b in el.behaviors}


def test_bundled_pages_load():
    pages = load_pages()
    assert {"home", "login", "admin", "settings", "notifications"} <= set(pages)
    assert pages["home"].title == "Dashboard"


def test_build_document_starts_loading_with_copies():
    layout = get_layout("home")
    first = build_document(layout, "/a")
    second = build_document(layout, "/b")
    assert first.ready_state == LOADING
    first.elements[0].bind("x")
    assert second.elements[0].behaviors == []


def test_render_home():
    document = render_page("home")
    assert document.ready_state == INTERACTIVE
    assert document.url == "/pages/home"
    assert {"dropdown", "language-menu", "heatmap", "repo-list", "tooltip", "copy-to-clipboard"} <= behaviors(document)


def test_render_admin_wires_admin_features():
    assert {"admin-form", "auth-source-select", "admin-email-filter", "user-list-search",
            "admin-config-toggle", "delete-confirm", "show-modal"} <= behaviors(render_page("admin"))


def test_render_is_fresh_every_time():
    render_page("login")
    document = render_page("login")
    for el in document.elements:
        assert len(el.behaviors) == len(set(el.behaviors))


def test_render_with_trace_logs(caplog):
    caplog.set_level(logging.INFO, logger="webui.init_runner")
    render_page("notifications", url="/pages/notifications?_ui_performance_trace=1")
    lines = [r.getMessage() for r in caplog.records if r.getMessage().startswith("performance trace:")]
    assert len(lines) == 20


def test_unknown_page():
    with pytest.raises(PageNotFoundError) as exc_info:
        render_page("nope")
    assert exc_info.value.page == "nope"


def test_load_pages_from_file(tmp_path):
    path = tmp_path / "pages.yaml"
    path.write_text("tiny:\n  elements:\n    - {tag: div, classes: [ui, dropdown]}\nblank:\n")
    pages = load_pages(path)
    assert pages["blank"].elements == []
    document = render_page("tiny", pages=pages)
    assert document.elements[0].behaviors == ["dropdown"]


def test_invalid_layout():
    with pytest.raises(ValueError, match="Invalid page layouts"):
        parse_pages({"broken": {"elements": [{"id": "missing-tag"}]}})


def test_load_pages_returns_a_copy():
    pages = load_pages()
    pages.pop("home")
    pages["extra"] = pages["login"]
    fresh = load_pages()
    assert "home" in fresh
    assert "extra" not in fresh
    assert render_page("home").ready_state == INTERACTIVE
