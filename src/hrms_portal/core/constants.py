"""Constants and defaults.

Note: Paths here are linked to by literal string from many screens; do not rename.
"""

LOGIN_PATH = "/login"
LOGOUT_PATH = "/logout"
UNAUTHORIZED_PATH = "/unauthorized"

SESSION_STORAGE_KEY = "userInfo"
ROLE_COOKIE_NAME = "role"
DEFAULT_ROLE_COOKIE_MAX_AGE = 8 * 60 * 60

DEFAULT_AVATAR = "/static/default-profile.svg"

DEFAULT_API_TIMEOUT_SECONDS = 5.0
DEFAULT_PROFILE_RENDER_WAIT = 0.25
DEFAULT_ENRICHMENT_WORKERS = 4
