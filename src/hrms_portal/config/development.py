import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Base URL of the accounts REST backend (without the /api/accounts suffix)
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "5"))

ROLE_COOKIE_MAX_AGE = int(os.getenv("ROLE_COOKIE_MAX_AGE", str(8 * 60 * 60)))

# How long a page render waits for the profile fetch before using cached values
PROFILE_RENDER_WAIT = float(os.getenv("PROFILE_RENDER_WAIT", "0.25"))
ENRICHMENT_WORKERS = int(os.getenv("ENRICHMENT_WORKERS", "4"))

# External collaborators, passed through untouched
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
CALENDAR_API_KEY = os.getenv("CALENDAR_API_KEY", "")
EMAIL_SERVICE_KEY = os.getenv("EMAIL_SERVICE_KEY", "")

DEBUG = True
