"""
webui.index
-----------
Entry point of the page bundle.

The eager initializers run as soon as start() is called. Everything else
waits for the document to become interactive and then goes through
call_init_functions(), which can trace how long each initializer took.
"""

from __future__ import annotations

import logging

from .dom import Document, on_dom_ready, set_document
from .init_runner import Initializer, call_init_functions
from .settings import BootstrapSettings
from .features.admin import (
    init_admin_common,
    init_admin_configs,
    init_admin_emails,
    init_admin_self_check,
    init_admin_user_list_search_form,
)
from .features.common_button import (
    init_global_button_click_on_enter,
    init_global_buttons,
    init_global_delete_button,
    init_global_show_modal,
)
from .features.common_form import (
    init_global_enter_quick_submit,
    init_global_fetch_action,
    init_global_form_dirty_leave_confirm,
)
from .features.common_page import (
    init_foot_language_menu,
    init_global_dropdown,
    init_global_tabular_menu,
    init_head_navbar_content_toggle,
)
from .features.eager import init_dir_auto, init_fomantic, init_submit_event_polyfill
from .features.user import (
    init_notification_count,
    init_notifications_table,
    init_oauth2_settings_disable_checkbox,
    init_scoped_access_token_categories,
    init_user_auth_oauth2,
    init_user_auth_webauthn,
    init_user_auth_webauthn_register,
    init_user_settings,
)
from .features.widgets import (
    init_auto_focus_end,
    init_captcha,
    init_color_pickers,
    init_comp_search_user_box,
    init_comp_web_hook_editor,
    init_context_popups,
    init_copy_content,
    init_dashboard_repo_list,
    init_global_copy_to_clipboard_listener,
    init_global_tooltips,
    init_heatmap,
    init_image_diff,
    init_install,
    init_pdf_viewer,
    init_stopwatch,
    init_table_sort,
)

logger = logging.getLogger(__name__)

EAGER_INITIALIZERS: tuple[Initializer, ...] = (
    init_fomantic,
    init_dir_auto,
    init_submit_event_polyfill,
)


def build_init_functions() -> list[Initializer]:
    """The feature initializers, in the order they run."""
    return [
        init_global_dropdown,
        init_global_tabular_menu,
        init_global_show_modal,
        init_global_fetch_action,
        init_global_tooltips,
        init_global_button_click_on_enter,
        init_global_buttons,
        init_global_copy_to_clipboard_listener,
        init_global_enter_quick_submit,
        init_global_form_dirty_leave_confirm,
        init_global_delete_button,

        init_comp_search_user_box,
        init_comp_web_hook_editor,

        init_install,

        init_head_navbar_content_toggle,
        init_foot_language_menu,

        init_context_popups,
        init_heatmap,
        init_image_diff,
        init_stopwatch,
        init_table_sort,
        init_auto_focus_end,
        init_copy_content,

        init_admin_common,
        init_admin_emails,
        init_admin_user_list_search_form,
        init_admin_configs,
        init_admin_self_check,

        init_dashboard_repo_list,

        init_notification_count,
        init_notifications_table,

        init_captcha,

        init_user_auth_oauth2,
        init_user_auth_webauthn,
        init_user_auth_webauthn_register,
        init_user_settings,
        init_pdf_viewer,
        init_scoped_access_token_categories,
        init_color_pickers,

        init_oauth2_settings_disable_checkbox,
    ]


def start(document: Document, settings: BootstrapSettings | None = None) -> None:
    """Start the bundle on document: eager setup now, the rest once it is ready."""
    set_document(document)
    for func in EAGER_INITIALIZERS:
        func()
    functions = build_init_functions()
    logger.debug(f"{len(functions)} initializers waiting for {document.url}")
    on_dom_ready(lambda: call_init_functions(functions, document=document, settings=settings), document)


__all__ = ["EAGER_INITIALIZERS", "build_init_functions", "start"]
