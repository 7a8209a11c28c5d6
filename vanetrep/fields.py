"""Reflective access to the fields of a :class:`ReputationMessage` by name."""

from __future__ import annotations

from dataclasses import dataclass

from vanetrep.message import ReputationMessage


@dataclass(frozen=True)
class FieldInfo:
    """Description of one message field as exposed to inspection tools."""

    name: str
    attribute: str
    type_name: str
    editable: bool


_FIELDS: tuple[FieldInfo, ...] = (
    FieldInfo("demoData", "demo_data", "string", True),
    FieldInfo("senderAddress", "sender_address", "veins::LAddress::L2Type", False),
    FieldInfo("serial", "serial", "int", True),
    FieldInfo("reputationValue", "reputation_value", "double", True),
    FieldInfo("signature", "signature", "string", True),
    FieldInfo("location", "location", "string", True),
    FieldInfo("senderPosition", "sender_position", "veins::Coord", False),
    FieldInfo("certificate", "certificate", "string", True),
    FieldInfo("caPublicKey", "ca_public_key", "string", True),
)

_BY_NAME: dict[str, tuple[int, FieldInfo]] = {
    info.name: (index, info) for index, info in enumerate(_FIELDS)
}


def _lookup(name: str) -> tuple[int, FieldInfo]:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown message field: {name!r}") from None


def _format_double(value: float) -> str:
    return format(value, ".16g")


def field_names() -> list[str]:
    """Names of all message fields, in declaration order."""
    return [info.name for info in _FIELDS]


def find_field(name: str) -> int:
    """Position of the field called ``name``; raises KeyError if there is none."""
    return _lookup(name)[0]


def field_type(name: str) -> str:
    """Declared type of the field called ``name``."""
    return _lookup(name)[1].type_name


def is_editable(name: str) -> bool:
    """Whether the field called ``name`` may be set from a string."""
    return _lookup(name)[1].editable


def field_value_as_string(message: ReputationMessage, name: str) -> str:
    """Render the value of field ``name`` of ``message`` as text."""
    info = _lookup(name)[1]
    value = getattr(message, info.attribute)
    if info.type_name == "double":
        return _format_double(value)
    return str(value)


def set_field_from_string(message: ReputationMessage, name: str, value: str) -> None:
    """Set field ``name`` of ``message`` from its textual form.

    Raises KeyError for an unknown field, ValueError for a read-only field
    or for text that does not parse as the field's type.
    """
    info = _lookup(name)[1]
    if not info.editable:
        raise ValueError(f"message field {name!r} is read-only")
    if info.type_name == "int":
        converted: object = int(value.strip())
    elif info.type_name == "double":
        converted = float(value.strip())
    else:
        converted = value
    setattr(message, info.attribute, converted)