from dataclasses import fields

import pytest

from modules.postal_receipt.models import (
    FieldPath,
    ParcelSize,
    ShipmentForm,
    ShipmentOptions,
    UnknownFieldError,
    update,
)


def _snapshot(form: ShipmentForm):
    return {path: path.read(form) for path in FieldPath}


def test_blank_form_defaults():
    form = ShipmentForm.blank()
    assert form.tracking_number == ""
    assert form.sender.name == "" and form.recipient.country == ""
    assert form.sender_notification.enabled is False
    assert form.recipient_notification.contact == ""
    assert form.options.delivery_confirmation is False
    assert form.options.priority is False
    assert form.options.size is ParcelSize.M


@pytest.mark.parametrize("path", [p for p in FieldPath if p.field not in (None, "enabled", "size", "priority", "delivery_confirmation")])
def test_update_changes_only_target_field(path):
    before = ShipmentForm.blank()
    after = path.apply(before, "changed")

    expected = _snapshot(before)
    expected[path] = "changed"
    assert _snapshot(after) == expected


def test_update_shares_untouched_sections():
    before = ShipmentForm.blank()
    after = update(before, "sender", "name", "Jan Kowalski")
    assert after.sender is not before.sender
    for f in fields(ShipmentForm):
        if f.name != "sender":
            assert getattr(after, f.name) is getattr(before, f.name)
    assert before.sender.name == ""


def test_tracking_number_replaces_whole_section():
    after = update(ShipmentForm.blank(), "tracking_number", None, "RR123456789PL")
    assert after.tracking_number == "RR123456789PL"
    assert FieldPath.TRACKING_NUMBER.read(after) == "RR123456789PL"


def test_values_are_not_validated():
    form = FieldPath.SENDER_POSTAL_CODE.apply(ShipmentForm.blank(), "not a postal code")
    assert form.sender.postal_code == "not a postal code"


def test_notification_toggle_keeps_contact():
    form = ShipmentForm.blank()
    form = FieldPath.SENDER_NOTIFICATION_ENABLED.apply(form, True)
    form = FieldPath.SENDER_NOTIFICATION_CONTACT.apply(form, "jan@example.com")
    form = FieldPath.SENDER_NOTIFICATION_ENABLED.apply(form, False)
    form = FieldPath.SENDER_NOTIFICATION_ENABLED.apply(form, True)
    assert form.sender_notification.contact == "jan@example.com"


@pytest.mark.parametrize("raw", ["S", "M", "L"])
def test_size_accepts_plain_strings(raw):
    form = FieldPath.OPTIONS_SIZE.apply(ShipmentForm.blank(), raw)
    assert form.options.size is ParcelSize(raw)


def test_size_outside_enum_is_rejected():
    with pytest.raises(ValueError):
        FieldPath.OPTIONS_SIZE.apply(ShipmentForm.blank(), "XL")
    with pytest.raises(ValueError):
        ShipmentOptions(size="")


def test_unknown_paths_raise():
    with pytest.raises(UnknownFieldError):
        update(ShipmentForm.blank(), "payment", "amount", 1)
    with pytest.raises(UnknownFieldError):
        update(ShipmentForm.blank(), "sender", "country", "PL")
    with pytest.raises(UnknownFieldError):
        FieldPath.parse("sender.nickname")


def test_parse_round_trips_dotted_names():
    assert FieldPath.parse("recipient.country") is FieldPath.RECIPIENT_COUNTRY
    assert FieldPath.parse("tracking_number") is FieldPath.TRACKING_NUMBER
    assert FieldPath.OPTIONS_SIZE.dotted == "options.size"
