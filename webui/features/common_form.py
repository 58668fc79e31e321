"""Form behaviors shared by every page."""

from ..dom import get_document
from . import wire


def init_global_fetch_action():
    wire("form.form-fetch-action, .link-action", "fetch-action")


def init_global_enter_quick_submit():
    wire("textarea.js-quick-submit", "quick-submit")


def init_global_form_dirty_leave_confirm():
    for form in get_document().query_selector_all("form"):
        if "ignore-dirty" not in form.classes:
            form.bind("dirty-leave-confirm")
