import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "5"))

ROLE_COOKIE_MAX_AGE = int(os.getenv("ROLE_COOKIE_MAX_AGE", str(8 * 60 * 60)))

PROFILE_RENDER_WAIT = float(os.getenv("PROFILE_RENDER_WAIT", "0.25"))
ENRICHMENT_WORKERS = int(os.getenv("ENRICHMENT_WORKERS", "8"))

SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
CALENDAR_API_KEY = os.getenv("CALENDAR_API_KEY", "")
EMAIL_SERVICE_KEY = os.getenv("EMAIL_SERVICE_KEY", "")

DEBUG = False
