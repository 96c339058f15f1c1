"""HTTP client for the lead intake endpoint"""
import httpx
from typing import Any, Dict, Optional
import logging

from leadform.config import get_settings

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """The intake endpoint did not acknowledge a submission"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class IntakeClient:
    """Posts form payloads to the intake endpoint. No retries."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        settings = get_settings()
        self.url = url or settings.intake_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    async def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send one submission as a JSON body

        Args:
            payload: Form values

        Returns:
            Decoded JSON acknowledgement (empty dict if the body is not JSON)

        Raises:
            SubmissionError: On a non-2xx status or a transport failure
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise SubmissionError(f"Error enviando: {e}") from e

        if not response.is_success:
            raise SubmissionError(
                f"Error enviando: HTTP {response.status_code}",
                status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError:
            logger.debug(f"Intake returned a non-JSON body: {response.text[:200]}")
            return {}
