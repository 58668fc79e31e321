"""Page chrome: dropdowns, tab menus, navbar and footer."""

from . import wire


def init_global_dropdown():
    wire(".ui.dropdown", "dropdown")


def init_global_tabular_menu():
    wire(".ui.menu.tabular", "tabular-menu")


def init_head_navbar_content_toggle():
    wire("#navbar-expand-toggle", "navbar-toggle")


def init_foot_language_menu():
    wire(".ui.dropdown.language", "language-menu")
