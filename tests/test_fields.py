import pytest

from vanetrep.fields import (
    field_names,
    field_type,
    field_value_as_string,
    find_field,
    is_editable,
    set_field_from_string,
)
from vanetrep.message import Coord, ReputationMessage


def test_field_names_in_declaration_order():
    assert field_names() == [
        "demoData",
        "senderAddress",
        "serial",
        "reputationValue",
        "signature",
        "location",
        "senderPosition",
        "certificate",
        "caPublicKey",
    ]


def test_find_field_matches_name_order():
    for position, name in enumerate(field_names()):
        assert find_field(name) == position


def test_find_unknown_field_raises():
    with pytest.raises(KeyError):
        find_field("nope")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("demoData", "string"),
        ("senderAddress", "veins::LAddress::L2Type"),
        ("serial", "int"),
        ("reputationValue", "double"),
        ("senderPosition", "veins::Coord"),
    ],
)
def test_field_types(name, expected):
    assert field_type(name) == expected


def test_read_only_fields():
    editable = {name for name in field_names() if is_editable(name)}
    assert set(field_names()) - editable == {"senderAddress", "senderPosition"}


@pytest.mark.parametrize(
    "name", ["demoData", "signature", "location", "certificate", "caPublicKey"]
)
def test_string_field_round_trip(name):
    message = ReputationMessage()
    set_field_from_string(message, name, "Accident ahead, change route.")
    assert field_value_as_string(message, name) == "Accident ahead, change route."


def test_set_serial_parses_integer():
    message = ReputationMessage()
    set_field_from_string(message, "serial", "7")
    assert message.serial == 7
    assert field_value_as_string(message, "serial") == "7"


def test_set_reputation_value_round_trip():
    message = ReputationMessage()
    set_field_from_string(message, "reputationValue", "0.25")
    assert message.reputation_value == 0.25
    assert field_value_as_string(message, "reputationValue") == "0.25"


def test_sender_address_as_string():
    message = ReputationMessage(sender_address=42)
    assert field_value_as_string(message, "senderAddress") == "42"


def test_sender_position_as_string_matches_coord():
    coord = Coord(1.5, 2.0, 0.0)
    message = ReputationMessage(sender_position=coord)
    assert field_value_as_string(message, "senderPosition") == str(coord)


def test_setting_read_only_field_raises():
    message = ReputationMessage(sender_address=3)
    with pytest.raises(ValueError):
        set_field_from_string(message, "senderAddress", "9")
    assert message.sender_address == 3


def test_bad_integer_text_raises():
    message = ReputationMessage()
    with pytest.raises(ValueError):
        set_field_from_string(message, "serial", "abc")
    assert message.serial == 0


def test_setting_unknown_field_raises():
    with pytest.raises(KeyError):
        set_field_from_string(ReputationMessage(), "bogus", "1")