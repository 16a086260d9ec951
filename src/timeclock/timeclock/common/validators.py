from __future__ import annotations

import re

from ..core.constants import CARD_ID_LENGTH, PIN_LENGTH
from ..core.exceptions import ValidationError

_PIN_RE = re.compile(r"^[A-Za-z0-9]{%d}$" % PIN_LENGTH)
_CARD_ID_RE = re.compile(r"^\d{%d}$" % CARD_ID_LENGTH)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_pin(value: str) -> str:
    pin = (value or "").strip()
    if not _PIN_RE.match(pin):
        raise ValidationError(f'PIN must consist of {PIN_LENGTH} letters or digits: "{pin}"')
    return pin


def require_card_id(value: str) -> str:
    card_id = (value or "").strip()
    if not _CARD_ID_RE.match(card_id):
        raise ValidationError(f'Card ID must consist of {CARD_ID_LENGTH} digits: "{card_id}"')
    return card_id
