"""Shipment field rule tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from conftest import shipment_fields
from shiptrack.exceptions import ShipmentValidationError
from shiptrack.validation import (
    UPDATABLE_FIELDS,
    check_dimensions,
    check_weight,
    validate_shipment_fields,
)

NOW = datetime(2030, 1, 1, tzinfo=UTC)


def _errors(exc_info) -> dict[str, str]:
    return {error.field: error.message for error in exc_info.value.errors}


class TestCreateValidation:
    def test_valid_fields_are_cleaned_and_defaulted(self) -> None:
        cleaned = validate_shipment_fields(
            shipment_fields(
                origin="  Warsaw  ",
                expected_delivery_date=NOW + timedelta(days=1),
            ),
            now=NOW,
        )
        assert cleaned["origin"] == "Warsaw"
        assert cleaned["status"] == "Pending"
        assert cleaned["shipment_type"] == "Standard"
        assert cleaned["is_fragile"] is False
        assert cleaned["is_urgent"] is False
        assert cleaned["notes"] is None

    def test_reports_every_missing_field(self) -> None:
        with pytest.raises(ShipmentValidationError) as exc_info:
            validate_shipment_fields({}, now=NOW)
        errors = _errors(exc_info)
        assert set(errors) == {
            "tracking_number",
            "origin",
            "destination",
            "weight",
            "dimensions",
            "expected_delivery_date",
            "carrier",
            "sender_name",
            "sender_contact",
            "receiver_name",
            "receiver_contact",
        }
        assert errors["origin"] == "Origin is required"

    def test_reports_all_violations_not_just_first(self) -> None:
        fields = shipment_fields(
            tracking_number="bad!",
            weight=0,
            dimensions="20x30cm",
            sender_contact="call me",
            expected_delivery_date=NOW + timedelta(days=1),
        )
        with pytest.raises(ShipmentValidationError) as exc_info:
            validate_shipment_fields(fields, now=NOW)
        errors = _errors(exc_info)
        assert set(errors) == {
            "tracking_number",
            "weight",
            "dimensions",
            "sender_contact",
        }
        assert errors["weight"] == "Weight must be at least 0.1kg"
        assert errors["sender_contact"] == "call me is not a valid phone number!"

    def test_blank_strings_count_as_missing(self) -> None:
        fields = shipment_fields(
            carrier="   ", expected_delivery_date=NOW + timedelta(days=1)
        )
        with pytest.raises(ShipmentValidationError) as exc_info:
            validate_shipment_fields(fields, now=NOW)
        assert _errors(exc_info) == {"carrier": "Carrier is required"}

    @pytest.mark.parametrize(
        "tracking_number", ["SHORT1", "A" * 21, "ABC-12345", "ABC 12345"]
    )
    def test_invalid_tracking_numbers(self, tracking_number) -> None:
        fields = shipment_fields(
            tracking_number=tracking_number,
            expected_delivery_date=NOW + timedelta(days=1),
        )
        with pytest.raises(ShipmentValidationError) as exc_info:
            validate_shipment_fields(fields, now=NOW)
        assert set(_errors(exc_info)) == {"tracking_number"}

    def test_past_delivery_date_rejected(self) -> None:
        fields = shipment_fields(expected_delivery_date=NOW - timedelta(days=1))
        with pytest.raises(ShipmentValidationError) as exc_info:
            validate_shipment_fields(fields, now=NOW)
        assert "must be in the future!" in _errors(exc_info)[
            "expected_delivery_date"
        ]

    def test_delivery_date_equal_to_now_rejected(self) -> None:
        fields = shipment_fields(expected_delivery_date=NOW)
        with pytest.raises(ShipmentValidationError):
            validate_shipment_fields(fields, now=NOW)

    def test_delivery_date_accepts_iso_string(self) -> None:
        cleaned = validate_shipment_fields(
            shipment_fields(expected_delivery_date="2030-02-01T10:00:00Z"),
            now=NOW,
        )
        assert cleaned["expected_delivery_date"] == datetime(
            2030, 2, 1, 10, tzinfo=UTC
        )

    def test_naive_delivery_date_treated_as_utc(self) -> None:
        cleaned = validate_shipment_fields(
            shipment_fields(expected_delivery_date=datetime(2030, 3, 1)),
            now=NOW,
        )
        assert cleaned["expected_delivery_date"].tzinfo is UTC

    def test_unknown_enum_values(self) -> None:
        fields = shipment_fields(
            shipment_type="Teleport",
            status="Lost",
            expected_delivery_date=NOW + timedelta(days=1),
        )
        with pytest.raises(ShipmentValidationError) as exc_info:
            validate_shipment_fields(fields, now=NOW)
        errors = _errors(exc_info)
        assert errors["shipment_type"] == "Teleport is not a valid shipment type"
        assert errors["status"] == "Lost is not a valid status"

    def test_explicit_status_kept(self) -> None:
        cleaned = validate_shipment_fields(
            shipment_fields(
                status="In Transit",
                expected_delivery_date=NOW + timedelta(days=1),
            ),
            now=NOW,
        )
        assert cleaned["status"] == "In Transit"

    def test_notes_length_limit(self) -> None:
        fields = shipment_fields(
            notes="x" * 501, expected_delivery_date=NOW + timedelta(days=1)
        )
        with pytest.raises(ShipmentValidationError) as exc_info:
            validate_shipment_fields(fields, now=NOW)
        assert _errors(exc_info) == {
            "notes": "Notes cannot exceed 500 characters"
        }

    def test_unknown_keys_are_dropped(self) -> None:
        cleaned = validate_shipment_fields(
            shipment_fields(
                id="f" * 24,
                colour="red",
                expected_delivery_date=NOW + timedelta(days=1),
            ),
            now=NOW,
        )
        assert "id" not in cleaned
        assert "colour" not in cleaned


class TestPartialValidation:
    def test_only_present_fields_are_checked(self) -> None:
        assert validate_shipment_fields(
            {"status": "Delivered"}, partial=True, now=NOW
        ) == {"status": "Delivered"}

    def test_tracking_number_is_not_updatable(self) -> None:
        assert "tracking_number" not in UPDATABLE_FIELDS
        assert (
            validate_shipment_fields(
                {"tracking_number": "NEWNUMBER1"}, partial=True, now=NOW
            )
            == {}
        )

    def test_changed_fields_are_revalidated(self) -> None:
        with pytest.raises(ShipmentValidationError) as exc_info:
            validate_shipment_fields(
                {"weight": 2000, "status": "Shipped"}, partial=True, now=NOW
            )
        assert set(_errors(exc_info)) == {"weight", "status"}

    def test_null_required_field_rejected(self) -> None:
        with pytest.raises(ShipmentValidationError) as exc_info:
            validate_shipment_fields({"origin": None}, partial=True, now=NOW)
        assert _errors(exc_info) == {"origin": "Origin is required"}

    def test_null_notes_clears_them(self) -> None:
        assert validate_shipment_fields(
            {"notes": None}, partial=True, now=NOW
        ) == {"notes": None}


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.1, 0.1), (1000, 1000.0), ("12.5", 12.5)],
)
def test_weight_bounds_inclusive(value, expected) -> None:
    assert check_weight(value, NOW) == expected


@pytest.mark.parametrize("value", [0.09, 1000.01, True, "heavy", None])
def test_weight_rejected(value) -> None:
    with pytest.raises(ValueError):
        check_weight(value, NOW)


@pytest.mark.parametrize("value", ["20x30x15cm", "1.5x2x3.25in", "1x1x1m"])
def test_dimensions_accepted(value) -> None:
    assert check_dimensions(value, NOW) == value


@pytest.mark.parametrize(
    "value", ["20x30x15", "20x30x15mm", "0x30x15cm", "20 x 30 x 15cm", "x1x1cm"]
)
def test_dimensions_rejected(value) -> None:
    with pytest.raises(ValueError):
        check_dimensions(value, NOW)
