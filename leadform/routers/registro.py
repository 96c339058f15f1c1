"""Lead intake endpoints"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import json
import logging

from leadform.config import Settings, get_settings
from leadform.models.registro import AckResponse, ProbeResponse
from leadform.utils.validation import validate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=ProbeResponse)
async def probe(settings: Settings = Depends(get_settings)):
    """Liveness probe"""
    return ProbeResponse(env=settings.environment, version=settings.app_version)


@router.post("", response_model=AckResponse)
async def receive(request: Request, settings: Settings = Depends(get_settings)):
    """Receive a lead (PUBLIC endpoint). Logged, never stored."""
    body = await request.body()
    try:
        data = json.loads(body)
    except ValueError as e:
        logger.warning(f"Rejected malformed lead body: {e}")
        return JSONResponse(status_code=400, content={"ok": False, "error": "JSON inválido"})

    if settings.validate_intake and isinstance(data, dict):
        errors = validate(data)
        if errors:
            logger.info(f"Lead rejected ({settings.environment}): {errors}")
            return JSONResponse(status_code=422, content={"ok": False, "errors": errors})

    logger.info(f"Lead recibido ({settings.environment}): {data}")
    return AckResponse()
