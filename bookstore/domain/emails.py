"""Email syntax validation and canonical normalization."""
from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

GMAIL_DOMAINS = {"gmail.com", "googlemail.com"}
ICLOUD_DOMAINS = {"icloud.com", "me.com"}
OUTLOOK_DOMAINS = {
    "hotmail.at", "hotmail.be", "hotmail.ca", "hotmail.cl", "hotmail.co.il",
    "hotmail.co.nz", "hotmail.co.th", "hotmail.co.uk", "hotmail.com",
    "hotmail.com.ar", "hotmail.com.au", "hotmail.com.br", "hotmail.com.gr",
    "hotmail.com.mx", "hotmail.com.pe", "hotmail.com.tr", "hotmail.com.vn",
    "hotmail.cz", "hotmail.de", "hotmail.dk", "hotmail.es", "hotmail.fr",
    "hotmail.hu", "hotmail.id", "hotmail.ie", "hotmail.in", "hotmail.it",
    "hotmail.jp", "hotmail.kr", "hotmail.lv", "hotmail.my", "hotmail.ph",
    "hotmail.pt", "hotmail.sa", "hotmail.sg", "hotmail.sk",
    "live.be", "live.co.uk", "live.com", "live.com.ar", "live.com.mx",
    "live.de", "live.es", "live.eu", "live.fr", "live.it", "live.nl",
    "msn.com",
    "outlook.at", "outlook.be", "outlook.cl", "outlook.co.il", "outlook.co.nz",
    "outlook.co.th", "outlook.com", "outlook.com.ar", "outlook.com.au",
    "outlook.com.br", "outlook.com.gr", "outlook.com.pe", "outlook.com.tr",
    "outlook.com.vn", "outlook.cz", "outlook.de", "outlook.dk", "outlook.es",
    "outlook.fr", "outlook.hu", "outlook.id", "outlook.ie", "outlook.in",
    "outlook.it", "outlook.jp", "outlook.kr", "outlook.lv", "outlook.my",
    "outlook.ph", "outlook.pt", "outlook.sa", "outlook.sg", "outlook.sk",
    "passport.com",
}
PLUS_TAG_DOMAINS = ICLOUD_DOMAINS | OUTLOOK_DOMAINS
DASH_TAG_DOMAINS = {
    "rocketmail.com", "yahoo.ca", "yahoo.co.uk", "yahoo.com", "yahoo.de",
    "yahoo.fr", "yahoo.in", "yahoo.it", "ymail.com",
}
YANDEX_DOMAINS = {"yandex.ru", "yandex.ua", "yandex.kz", "yandex.com", "yandex.by", "ya.ru"}


class InvalidEmailError(ValueError):
    """Raised when a value is not a syntactically valid email address."""


def canonical_mailbox(local: str, domain: str) -> tuple[str, str]:
    """Apply provider rules to an already lowercased address."""
    if domain in GMAIL_DOMAINS:
        local = local.split("+", 1)[0].replace(".", "")
        domain = "gmail.com"
    elif domain in PLUS_TAG_DOMAINS:
        local = local.split("+", 1)[0]
    elif domain in DASH_TAG_DOMAINS:
        # only the last dash segment is a tag
        if "-" in local:
            local = local.rsplit("-", 1)[0]
    elif domain in YANDEX_DOMAINS:
        domain = "yandex.ru"
    return local, domain


def normalize_email(value: str | None) -> str:
    """
    Validate ``value`` and return its canonical form.

    The address is lowercased; gmail drops dots and ``+tag`` suffixes,
    outlook/icloud drop ``+tag``, yahoo drops its last ``-tag``
    and yandex aliases collapse onto yandex.ru.
    """
    candidate = (value or "").strip()
    if not candidate:
        raise InvalidEmailError("Invalid email format")
    try:
        validated = validate_email(candidate, check_deliverability=False)
    except EmailNotValidError as exc:
        raise InvalidEmailError("Invalid email format") from exc
    local, domain = validated.local_part.lower(), validated.domain.lower()
    local, domain = canonical_mailbox(local, domain)
    if not local:
        raise InvalidEmailError("Invalid email format")
    return f"{local}@{domain}"
