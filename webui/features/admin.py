"""Site administration pages."""

from ..dom import get_document
from . import wire


def init_admin_common():
    if get_document().query_selector(".page-content.admin") is None:
        return
    wire("form.admin-setting-form", "admin-form")
    wire("select#auth_type", "auth-source-select")


def init_admin_emails():
    wire(".ui.dropdown.admin-email-filter", "admin-email-filter")


def init_admin_user_list_search_form():
    wire("#user-list-search-form", "user-list-search")


def init_admin_configs():
    wire("input[type=checkbox][data-config-dyn-key]", "admin-config-toggle")


def init_admin_self_check():
    wire(".page-content.admin.self-check", "self-check")
