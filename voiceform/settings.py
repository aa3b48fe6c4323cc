# voiceform/settings.py
import os
from pathlib import Path

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")

# Sessions idle longer than this are evicted; <= 0 keeps them for the process lifetime
SESSION_TTL_SECONDS = int(os.getenv("SESSION_TTL_SECONDS", "3600"))

# Appended to spoken email answers that never said "at"
DEFAULT_EMAIL_DOMAIN = os.getenv("DEFAULT_EMAIL_DOMAIN", "gmail.com")

PACKAGE_ROOT = Path(__file__).resolve().parent
TRANSLATIONS_PATH = Path(os.getenv("TRANSLATIONS_PATH", PACKAGE_ROOT / "data" / "translations.json"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]
