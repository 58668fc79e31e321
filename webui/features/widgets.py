"""Standalone widgets: tooltips, clipboard, tables, heatmap, viewers and pickers."""

from ..dom import get_document
from . import wire


def init_global_tooltips():
    wire("[data-tooltip-content]", "tooltip")


def init_global_copy_to_clipboard_listener():
    wire("[data-clipboard-text], [data-clipboard-target]", "copy-to-clipboard")


def init_comp_search_user_box():
    wire("#search-user-box", "search-user-box")


def init_comp_web_hook_editor():
    wire(".new.webhook", "webhook-editor")


def init_install():
    wire(".page-content.install", "install-form")


def init_context_popups():
    wire(".ref-issue", "context-popup")


def init_heatmap():
    wire("#user-heatmap", "heatmap")


def init_image_diff():
    wire(".image-diff", "image-diff")


def init_stopwatch():
    wire(".active-stopwatch", "stopwatch")


def init_table_sort():
    for th in get_document().query_selector_all("th[data-sortt-asc]"):
        # a header without a descending key sorts one way only
        th.bind("table-sort" if "data-sortt-desc" in th.attrs else "table-sort-asc")


def init_auto_focus_end():
    wire(".js-autofocus-end", "autofocus-end")


def init_copy_content():
    wire("#copy-content", "copy-content")


def init_dashboard_repo_list():
    wire("#dashboard-repo-list", "repo-list")


def init_captcha():
    wire(".captcha-container, #captcha", "captcha")


def init_pdf_viewer():
    wire("[data-render-name=pdf-viewer]", "pdf-viewer")


def init_color_pickers():
    wire(".js-color-picker-input", "color-picker")
