"""Registration form Pydantic models"""
from enum import Enum
from pydantic import BaseModel
from typing import Dict, List, Tuple


FIELD_NAMES: Tuple[str, ...] = ("nombre", "cedula", "telefono", "email", "monto")

# (value, label); the empty value is the select placeholder
MONTO_OPTIONS: List[Tuple[str, str]] = [
    ("", "Selecciona un monto"),
    ("50000", "$50,000"),
    ("97000", "$97,000"),
]

FieldErrors = Dict[str, str]


class RegistroForm(BaseModel):
    """Values of the registration form, as typed by the user"""
    nombre: str = ""
    cedula: str = ""
    telefono: str = ""
    email: str = ""
    monto: str = ""


class SubmissionStatus(str, Enum):
    """Submit lifecycle of a form controller"""
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FieldChanged(BaseModel):
    """User edited one field"""
    field: str
    value: str


class SubmitRequested(BaseModel):
    """User pressed the submit button"""


class ProbeResponse(BaseModel):
    """Liveness probe payload"""
    ok: bool = True
    env: str
    version: str


class AckResponse(BaseModel):
    """Acknowledgement of a received lead"""
    ok: bool = True
