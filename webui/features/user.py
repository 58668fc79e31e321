"""Signed-in user features: notifications, authentication and settings."""

from . import wire


def init_notification_count():
    wire(".notification_count", "notification-count")


def init_notifications_table():
    wire("#notification_table", "notification-table")


def init_user_auth_oauth2():
    wire("#oauth2-login-navigator", "oauth2-login")


def init_user_auth_webauthn():
    wire(".user.signin.webauthn-prompt", "webauthn-login")


def init_user_auth_webauthn_register():
    wire("#register-webauthn", "webauthn-register")


def init_user_settings():
    wire(".user.settings.profile", "user-settings")


def init_scoped_access_token_categories():
    wire("#scoped-access-token-selector", "token-scopes")


def init_oauth2_settings_disable_checkbox():
    wire(".disable-setting", "oauth2-settings-toggle")
