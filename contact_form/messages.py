"""User-facing response messages, keyed by locale."""

from typing import Dict

from contact_form.config import DEFAULT_LOCALE

MISSING_FIELDS = "missing_fields"
CAPTCHA_FAILED = "captcha_failed"
SENT = "sent"
SERVER_ERROR = "server_error"

CATALOGS: Dict[str, Dict[str, str]] = {
    "pl": {
        MISSING_FIELDS: "Uzupełnij wszystkie pola i zgody.",
        CAPTCHA_FAILED: "Weryfikacja nieudana.",
        SENT: "Wysłano!",
        SERVER_ERROR: "Błąd serwera.",
    },
    "en": {
        MISSING_FIELDS: "Please fill in all fields and consents.",
        CAPTCHA_FAILED: "Verification failed.",
        SENT: "Sent!",
        SERVER_ERROR: "Server error.",
    },
}


def get_catalog(locale: str) -> Dict[str, str]:
    # Unknown locales fall back to Polish
    return CATALOGS.get(locale, CATALOGS[DEFAULT_LOCALE])
