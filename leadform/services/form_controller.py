"""Client-side state machine of the registration form"""
import asyncio
import logging
from typing import List, Optional, Tuple, Union

from leadform.config import get_settings
from leadform.models.registro import (
    MONTO_OPTIONS,
    FieldChanged,
    FieldErrors,
    RegistroForm,
    SubmissionStatus,
    SubmitRequested,
)
from leadform.services.intake_client import IntakeClient, SubmissionError
from leadform.utils.validation import normalize_field, validate

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Enviar formulario"
SUBMITTING_LABEL = "Enviando..."
SUCCESS_TITLE = "¡Formulario enviado!"
SUCCESS_DETAIL = "Tus datos fueron procesados."
FAILURE_MESSAGE = "No pudimos enviar tus datos. Intenta de nuevo."


class FormController:
    """
    Owns the values, field errors and submit status of one rendered form.

    All mutations happen on the event loop thread: field changes, submit
    attempts and the post-success reset timer. A view reads the public
    attributes and properties after each event.

    Args:
        client: Intake client used for submissions
        reset_delay: Seconds the success state is shown before the form
            goes back to an empty idle state
    """

    def __init__(self, client: Optional[IntakeClient] = None, reset_delay: Optional[float] = None):
        settings = get_settings()
        self.client = client or IntakeClient()
        self.reset_delay = reset_delay if reset_delay is not None else settings.success_reset_seconds

        self.values = RegistroForm()
        self.errors: FieldErrors = {}
        self.status = SubmissionStatus.IDLE
        self.failure_message: Optional[str] = None

        self._reset_handle: Optional[asyncio.TimerHandle] = None
        self._closed = False

    async def __aenter__(self) -> "FormController":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    # View state

    @property
    def is_submitting(self) -> bool:
        return self.status is SubmissionStatus.IN_FLIGHT

    @property
    def submit_label(self) -> str:
        return SUBMITTING_LABEL if self.is_submitting else SUBMIT_LABEL

    @property
    def success_title(self) -> str:
        return SUCCESS_TITLE

    @property
    def success_detail(self) -> str:
        return SUCCESS_DETAIL

    @property
    def monto_options(self) -> List[Tuple[str, str]]:
        return list(MONTO_OPTIONS)

    @property
    def closed(self) -> bool:
        return self._closed

    # Events

    def on_field_change(self, field: str, raw_value: str) -> None:
        """Store a normalized value and drop that field's error, if any."""
        if self._closed or self.status is SubmissionStatus.SUCCEEDED:
            return

        value = normalize_field(field, raw_value)
        self.values = self.values.model_copy(update={field: value})
        # Only this field's error goes; the rest wait for the next submit
        self.errors.pop(field, None)

    def validate(self) -> FieldErrors:
        return validate(self.values)

    async def submit(self) -> SubmissionStatus:
        """
        Validate and, if valid, post the current values once

        Returns:
            Status after the attempt
        """
        if self._closed or self.status in (SubmissionStatus.IN_FLIGHT, SubmissionStatus.SUCCEEDED):
            return self.status

        errors = self.validate()
        if errors:
            self.errors = errors
            # New field errors replace an earlier send failure
            if self.status is SubmissionStatus.FAILED:
                self.status = SubmissionStatus.IDLE
                self.failure_message = None
            return self.status

        self.errors = {}
        self.failure_message = None
        # Set before the first await so a second submit sees it
        self.status = SubmissionStatus.IN_FLIGHT
        payload = self.values.model_dump()

        try:
            await self.client.send(payload)
        except SubmissionError as e:
            logger.warning(f"Submission failed (status={e.status_code}): {e}")
            self._fail()
        except Exception:
            self._fail()
            raise
        else:
            if not self._closed:
                logger.info("Submission acknowledged")
                self.status = SubmissionStatus.SUCCEEDED
                loop = asyncio.get_running_loop()
                self._reset_handle = loop.call_later(self.reset_delay, self._reset)
        finally:
            # A cancelled send skips every branch above
            if self.status is SubmissionStatus.IN_FLIGHT and not self._closed:
                logger.info("Submission cancelled while in flight")
                self.status = SubmissionStatus.IDLE
        return self.status

    async def dispatch(self, event: Union[FieldChanged, SubmitRequested]) -> SubmissionStatus:
        """Apply one UI event and return the resulting status"""
        if isinstance(event, FieldChanged):
            self.on_field_change(event.field, event.value)
        elif isinstance(event, SubmitRequested):
            await self.submit()
        else:
            raise TypeError(f"Unsupported form event: {type(event).__name__}")
        return self.status

    def close(self) -> None:
        """Tear down: cancel the pending reset and freeze the state."""
        self._closed = True
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _fail(self) -> None:
        if self._closed:
            return
        self.status = SubmissionStatus.FAILED
        self.failure_message = FAILURE_MESSAGE

    def _reset(self) -> None:
        self._reset_handle = None
        if self._closed:
            return
        self.values = RegistroForm()
        self.errors = {}
        self.failure_message = None
        self.status = SubmissionStatus.IDLE
