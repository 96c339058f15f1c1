"""
Field normalization and validation for the registration form.

Both functions are pure: the controller calls them on every keystroke and
submit attempt, and the intake endpoint can reuse `validate` server-side.
"""
import re
from typing import Any, Mapping, Union

from leadform.models.registro import FIELD_NAMES, FieldErrors, RegistroForm

DIGIT_FIELDS = ("cedula", "telefono")
MAX_DIGITS_LENGTH = 10

_NON_DIGITS = re.compile(r"[^0-9]")
_CEDULA = re.compile(r"[0-9]{8,10}")
_TELEFONO = re.compile(r"[0-9]{10}")
_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MESSAGES = {
    "nombre_required": "El nombre es requerido",
    "cedula_required": "La cédula es requerida",
    "cedula_invalid": "La cédula debe tener entre 8 y 10 dígitos",
    "telefono_required": "El teléfono es requerido",
    "telefono_invalid": "El teléfono debe tener 10 dígitos",
    "email_required": "El email es requerido",
    "email_invalid": "El email no es válido",
    "monto_required": "Debes seleccionar un monto",
}


def normalize_field(field: str, raw: str) -> str:
    """
    Normalize a raw input value before it is stored

    Args:
        field: Form field name
        raw: Value as typed or pasted by the user

    Returns:
        Digits only (capped at the input length) for cedula and telefono,
        the raw value for every other field

    Raises:
        ValueError: If the field is not part of the form
    """
    if field not in FIELD_NAMES:
        raise ValueError(f"Unknown form field: {field}")
    if field in DIGIT_FIELDS:
        return _NON_DIGITS.sub("", raw)[:MAX_DIGITS_LENGTH]
    return raw


def validate(values: Union[RegistroForm, Mapping[str, Any]]) -> FieldErrors:
    """Return an error message for each failing field; passing fields are absent."""
    if isinstance(values, RegistroForm):
        values = values.model_dump()

    def get(name: str) -> str:
        value = values.get(name)
        return value if isinstance(value, str) else ""

    nombre, cedula, telefono, email, monto = (get(name) for name in FIELD_NAMES)
    errors: FieldErrors = {}

    if not nombre.strip():
        errors["nombre"] = MESSAGES["nombre_required"]

    if not cedula.strip():
        errors["cedula"] = MESSAGES["cedula_required"]
    elif not _CEDULA.fullmatch(cedula):
        errors["cedula"] = MESSAGES["cedula_invalid"]

    if not telefono.strip():
        errors["telefono"] = MESSAGES["telefono_required"]
    elif not _TELEFONO.fullmatch(telefono):
        errors["telefono"] = MESSAGES["telefono_invalid"]

    if not email.strip():
        errors["email"] = MESSAGES["email_required"]
    elif not _EMAIL.fullmatch(email):
        errors["email"] = MESSAGES["email_invalid"]

    if not monto.strip():
        errors["monto"] = MESSAGES["monto_required"]

    return errors
