import logging
import re
from typing import Optional

from voiceform.settings import DEFAULT_EMAIL_DOMAIN
from .base import Normalizer

log = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
EMAIL_JUNK_RE = re.compile(r"[^a-zA-Z0-9@._-]")
# optional +country code, optional (area code), 3-3-4 grouping; ASCII digits only
PHONE_RE = re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII)
# D/M/Y or Y/M/D with - or / separators
DATE_RE = re.compile(r"\d{1,2}[-/]\d{1,2}[-/]\d{2,4}|\d{4}[-/]\d{1,2}[-/]\d{1,2}", re.ASCII)
MONTHS = {
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
}


class RuleNormalizer(Normalizer):
    """
    Pattern-based normalizer for spoken answers.
    Dispatches on the declared field type; unknown types are treated as text.
    """
    def __init__(self, email_domain: str = DEFAULT_EMAIL_DOMAIN):
        self.email_domain = email_domain

    def normalize_answer(self, text: str, field_type: Optional[str], language: str = "en") -> str:
        t = clean(text)
        kind = (field_type or "text").strip().lower()
        if kind == "email":
            return norm_email(t, self.email_domain)
        if kind in ("tel", "phone"):
            return norm_phone(t)
        if kind == "date":
            return norm_date(t)
        return norm_text(t)


# --- Individual field helpers (all take already-cleaned text) ---

def clean(s: Optional[str]) -> str:
    """Trim and lower-case; None becomes the empty string."""
    return (s or "").strip().lower()

def norm_email(t: str, default_domain: str = DEFAULT_EMAIL_DOMAIN) -> str:
    """Pull out the first address, or rebuild one from 'my email is ...' phrasing."""
    m = EMAIL_RE.search(t)
    if m:
        return m.group(0).lower()
    words = t.split()
    if "email" in words or "e-mail" in words:
        rebuilt = EMAIL_JUNK_RE.sub("", t)
        return rebuilt if "@" in rebuilt else f"{rebuilt}@{default_domain}"
    return t

def norm_phone(t: str) -> str:
    """Keep digits (and a leading +) of the first phone-looking token."""
    m = PHONE_RE.search(t)
    if m:
        return re.sub(r"[^0-9+]", "", m.group(0))
    digits = re.sub(r"[^0-9]", "", t)
    if len(digits) >= 10:
        return digits if len(digits) == 10 else f"+{digits}"
    return t

def norm_date(t: str) -> str:
    """Numeric dates come back verbatim; everything else is left as spoken."""
    m = DATE_RE.search(t)
    if m:
        return m.group(0)
    if MONTHS.intersection(re.findall(r"[a-z]+", t)):
        # TODO: turn "january 15 1990" into a numeric date once a parser is picked
        log.debug("month-name date left as spoken: %r", t)
    return t

def norm_text(t: str) -> str:
    """Capitalize the first character only."""
    return t[:1].upper() + t[1:]
