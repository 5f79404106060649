import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from scriptgen.api.config import MAX_EVENTS
from scriptgen.api.models.script import ScriptGenerateRequest, ScriptGenerateResponse
from scriptgen.api.services.script_generation import generate_script
from scriptgen.errors import InvalidOptionError
from scriptgen.utils.options import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scripts", tags=["scripts"])


@router.get("/defaults")
async def get_default_options() -> Dict[str, Any]:
    return dict(DEFAULT_OPTIONS)


@router.post("/generate", response_model=ScriptGenerateResponse)
async def generate(request: ScriptGenerateRequest) -> ScriptGenerateResponse:
    if len(request.events) > MAX_EVENTS:
        logger.warning(f"Rejected request with {len(request.events)} events")
        raise HTTPException(
            status_code=413,
            detail=f"Too many events: at most {MAX_EVENTS} are accepted",
        )

    try:
        script, options = generate_script(request.events, request.options)
    except InvalidOptionError as e:
        logger.error(f"Invalid generator options: {e}")
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e

    return ScriptGenerateResponse(
        script=script,
        event_count=len(request.events),
        options=options,
    )
