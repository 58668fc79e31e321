"""Global button helpers."""

from . import wire


def init_global_show_modal():
    wire(".show-modal", "show-modal")


def init_global_button_click_on_enter():
    # only non-button elements acting as buttons need Enter to click
    wire("div[role=button], span[role=button], a[role=button]", "click-on-enter")


def init_global_buttons():
    wire(".show-panel, .hide-panel, .toggle-panel", "panel-toggle")
    wire(".cancel", "cancel-button")


def init_global_delete_button():
    wire(".delete-button", "delete-confirm")
