"""Tests for field normalization and validation."""

import pytest

from leadform.models.registro import RegistroForm
from leadform.utils.validation import MESSAGES, normalize_field, validate


def _with(valid_values: dict, **changes) -> dict:
    return {**valid_values, **changes}


class TestNormalizeField:
    """Tests for input normalization."""

    def test_phone_strips_hyphens(self):
        assert normalize_field("telefono", "30-0123") == "300123"

    def test_cedula_strips_letters_and_spaces(self):
        assert normalize_field("cedula", "12 345.678a") == "12345678"

    def test_digit_fields_capped_at_ten(self):
        assert normalize_field("telefono", "300 123 4567 89") == "3001234567"

    def test_non_ascii_digits_are_stripped(self):
        assert normalize_field("cedula", "١٢٣12345678") == "12345678"

    def test_other_fields_stored_verbatim(self):
        assert normalize_field("nombre", "  Ana María  ") == "  Ana María  "
        assert normalize_field("email", "a-b@c.co") == "a-b@c.co"

    def test_unknown_field_raises(self):
        with pytest.raises(ValueError, match="Unknown form field"):
            normalize_field("apellido", "x")


class TestValidate:
    """Tests for the per-field rules."""

    def test_valid_values_have_no_errors(self, valid_values):
        assert validate(valid_values) == {}

    def test_accepts_form_model(self, valid_values):
        assert validate(RegistroForm(**valid_values)) == {}

    def test_empty_form_reports_every_field(self):
        errors = validate(RegistroForm())
        assert errors == {
            "nombre": MESSAGES["nombre_required"],
            "cedula": "La cédula es requerida",
            "telefono": MESSAGES["telefono_required"],
            "email": MESSAGES["email_required"],
            "monto": MESSAGES["monto_required"],
        }

    def test_whitespace_name_is_empty(self, valid_values):
        assert validate(_with(valid_values, nombre="   ")) == {"nombre": "El nombre es requerido"}

    @pytest.mark.parametrize("cedula", ["12345678", "123456789", "1234567890"])
    def test_cedula_lengths_that_pass(self, valid_values, cedula):
        assert "cedula" not in validate(_with(valid_values, cedula=cedula))

    @pytest.mark.parametrize("cedula", ["1234567", "12345678a", "12345678901", "１２３４５６７８"])
    def test_cedula_invalid(self, valid_values, cedula):
        assert validate(_with(valid_values, cedula=cedula)) == {
            "cedula": "La cédula debe tener entre 8 y 10 dígitos"
        }

    def test_cedula_empty_is_required_error(self, valid_values):
        assert validate(_with(valid_values, cedula="")) == {"cedula": "La cédula es requerida"}

    def test_phone_ten_digits_passes(self, valid_values):
        assert validate(_with(valid_values, telefono="3001234567")) == {}

    @pytest.mark.parametrize("telefono", ["300123456", "30012345678"])
    def test_phone_wrong_length(self, valid_values, telefono):
        assert validate(_with(valid_values, telefono=telefono)) == {
            "telefono": "El teléfono debe tener 10 dígitos"
        }

    def test_phone_trailing_newline_fails(self, valid_values):
        assert "telefono" in validate(_with(valid_values, telefono="3001234567\n"))

    def test_email_shape(self, valid_values):
        assert "email" not in validate(_with(valid_values, email="a@b.co"))
        assert validate(_with(valid_values, email="a@b")) == {"email": "El email no es válido"}
        assert validate(_with(valid_values, email="a b@c.com")) == {"email": "El email no es válido"}
        assert validate(_with(valid_values, email="a@@b.co")) == {"email": "El email no es válido"}
        assert validate(_with(valid_values, email="")) == {"email": "El email es requerido"}

    @pytest.mark.parametrize("monto", ["50000", "97000"])
    def test_amount_choices_pass(self, valid_values, monto):
        assert validate(_with(valid_values, monto=monto)) == {}

    def test_amount_empty_fails(self, valid_values):
        assert validate(_with(valid_values, monto="")) == {"monto": "Debes seleccionar un monto"}

    def test_rules_are_independent(self, valid_values):
        errors = validate(_with(valid_values, cedula="1", email="nope"))
        assert set(errors) == {"cedula", "email"}

    def test_missing_and_non_string_keys_count_as_empty(self):
        errors = validate({"nombre": "Ana", "cedula": 12345678})
        assert errors["cedula"] == "La cédula es requerida"
        assert "nombre" not in errors

    def test_validate_is_pure(self, valid_values):
        values = _with(valid_values, telefono="123")
        snapshot = dict(values)
        first = validate(values)
        second = validate(values)
        assert first == second == {"telefono": "El teléfono debe tener 10 dígitos"}
        assert values == snapshot
