SECRET_KEY = "test-secret"

API_BASE_URL = "http://backend.test"
API_TIMEOUT_SECONDS = 1.0

ROLE_COOKIE_MAX_AGE = 60 * 60

PROFILE_RENDER_WAIT = 0.0
ENRICHMENT_WORKERS = 1

SUPABASE_URL = ""
SUPABASE_KEY = ""
CALENDAR_API_KEY = ""
EMAIL_SERVICE_KEY = ""

DEBUG = False
TESTING = True
