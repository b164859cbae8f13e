"""Explicit shipment field rules.

Every rule is a plain function taking the raw value and the validation
instant and returning the cleaned value, or raising ``ValueError`` with a
client-facing message.  :func:`validate_shipment_fields` runs all applicable
rules and raises a single :class:`ShipmentValidationError` listing every
violation instead of stopping at the first one.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from shiptrack.enums import ShipmentStatus, ShipmentType
from shiptrack.exceptions import FieldError, ShipmentValidationError

TRACKING_NUMBER_RE = re.compile(r"[A-Za-z0-9]{8,20}")
DIMENSIONS_RE = re.compile(
    r"(\d+(?:\.\d+)?)x(\d+(?:\.\d+)?)x(\d+(?:\.\d+)?)(cm|in|m)"
)
PHONE_RE = re.compile(r"\+?\(?[0-9]{3}\)?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}")

MIN_WEIGHT = 0.1
MAX_WEIGHT = 1000.0
MAX_NOTES_LENGTH = 500

_MISSING = object()


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime (naive means UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _text(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    value = value.strip()
    if not value:
        raise ValueError(f"{label} is required")
    return value


def _required_text(label: str) -> Callable[[Any, datetime], str]:
    def check(value: Any, now: datetime) -> str:
        return _text(value, label)

    return check


def check_tracking_number(value: Any, now: datetime) -> str:
    value = _text(value, "Tracking number")
    if not TRACKING_NUMBER_RE.fullmatch(value):
        raise ValueError(f"{value} is not a valid tracking number!")
    return value


def check_weight(value: Any, now: datetime) -> float:
    if isinstance(value, bool):
        raise ValueError("Weight must be a number")
    if isinstance(value, (int, float, Decimal)):
        weight = float(value)
    elif isinstance(value, str):
        try:
            weight = float(value.strip())
        except ValueError:
            raise ValueError("Weight must be a number") from None
    else:
        raise ValueError("Weight must be a number")
    if weight != weight:
        raise ValueError("Weight must be a number")
    if weight < MIN_WEIGHT:
        raise ValueError("Weight must be at least 0.1kg")
    if weight > MAX_WEIGHT:
        raise ValueError("Weight cannot exceed 1000kg")
    return weight


def check_dimensions(value: Any, now: datetime) -> str:
    value = _text(value, "Dimensions")
    match = DIMENSIONS_RE.fullmatch(value)
    if match is None or any(float(part) <= 0 for part in match.groups()[:3]):
        raise ValueError(
            f"{value} is not valid dimensions format! "
            "Use LxWxH with unit (e.g., 20x30x15cm)"
        )
    return value


def check_delivery_date(value: Any, now: datetime) -> datetime:
    if isinstance(value, str):
        raw = value.strip()
        try:
            value = datetime.fromisoformat(raw)
        except ValueError:
            raise ValueError(f"{raw} is not a valid date") from None
    if not isinstance(value, datetime):
        raise ValueError("Expected delivery date must be a date")
    value = as_utc(value)
    if value <= now:
        raise ValueError(f"{value.isoformat()} must be in the future!")
    return value


def check_shipment_type(value: Any, now: datetime) -> str:
    try:
        return ShipmentType(value).value
    except ValueError:
        raise ValueError(f"{value} is not a valid shipment type") from None


def check_status(value: Any, now: datetime) -> str:
    try:
        return ShipmentStatus(value).value
    except ValueError:
        raise ValueError(f"{value} is not a valid status") from None


def _phone(label: str) -> Callable[[Any, datetime], str]:
    def check(value: Any, now: datetime) -> str:
        value = _text(value, label)
        if not PHONE_RE.fullmatch(value):
            raise ValueError(f"{value} is not a valid phone number!")
        return value

    return check


def _flag(label: str) -> Callable[[Any, datetime], bool]:
    def check(value: Any, now: datetime) -> bool:
        if not isinstance(value, bool):
            raise ValueError(f"{label} must be a boolean")
        return value

    return check


def check_notes(value: Any, now: datetime) -> str:
    if not isinstance(value, str):
        raise ValueError("Notes must be a string")
    value = value.strip()
    if len(value) > MAX_NOTES_LENGTH:
        raise ValueError("Notes cannot exceed 500 characters")
    return value


@dataclass(frozen=True)
class FieldRule:
    label: str
    check: Callable[[Any, datetime], Any]
    required: bool = True
    default: Any = _MISSING


FIELD_RULES: dict[str, FieldRule] = {
    "tracking_number": FieldRule("Tracking number", check_tracking_number),
    "origin": FieldRule("Origin", _required_text("Origin")),
    "destination": FieldRule("Destination", _required_text("Destination")),
    "weight": FieldRule("Weight", check_weight),
    "dimensions": FieldRule("Dimensions", check_dimensions),
    "expected_delivery_date": FieldRule(
        "Expected delivery date", check_delivery_date
    ),
    "shipment_type": FieldRule(
        "Shipment type",
        check_shipment_type,
        default=ShipmentType.STANDARD.value,
    ),
    "carrier": FieldRule("Carrier", _required_text("Carrier")),
    "is_fragile": FieldRule("Is fragile", _flag("Is fragile"), default=False),
    "is_urgent": FieldRule("Is urgent", _flag("Is urgent"), default=False),
    "sender_name": FieldRule("Sender name", _required_text("Sender name")),
    "sender_contact": FieldRule("Sender contact", _phone("Sender contact")),
    "receiver_name": FieldRule(
        "Receiver name", _required_text("Receiver name")
    ),
    "receiver_contact": FieldRule(
        "Receiver contact", _phone("Receiver contact")
    ),
    "notes": FieldRule("Notes", check_notes, required=False, default=None),
    "status": FieldRule(
        "Status", check_status, default=ShipmentStatus.PENDING.value
    ),
}

# Everything except tracking_number; id and timestamps are not client fields.
UPDATABLE_FIELDS: frozenset[str] = frozenset(FIELD_RULES) - {
    "tracking_number"
}


def validate_shipment_fields(
    fields: Mapping[str, Any],
    *,
    partial: bool = False,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Validate and clean shipment fields.

    With ``partial=False`` every rule runs and defaults fill absent optional
    fields.  With ``partial=True`` only fields present in ``fields`` (and
    allowed to change) are checked.  Unknown keys are dropped.
    """
    now = now or utcnow()
    names = UPDATABLE_FIELDS if partial else FIELD_RULES.keys()
    cleaned: dict[str, Any] = {}
    errors: list[FieldError] = []

    for name in FIELD_RULES:
        if name not in names:
            continue
        rule = FIELD_RULES[name]
        value = fields.get(name)
        if value is None:
            if partial and name not in fields:
                continue
            if not partial and rule.default is not _MISSING:
                cleaned[name] = rule.default
            elif not rule.required:
                cleaned[name] = None
            else:
                errors.append(FieldError(name, f"{rule.label} is required"))
            continue
        try:
            cleaned[name] = rule.check(value, now)
        except ValueError as exc:
            errors.append(FieldError(name, str(exc)))

    if errors:
        raise ShipmentValidationError(errors)
    return cleaned
