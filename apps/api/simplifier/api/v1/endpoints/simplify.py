import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from simplifier.api.deps import get_llm_provider
from simplifier.core.config import get_settings
from simplifier.core.llm import (
    LLMClient,
    LLMConfigurationError,
    LLMRateLimitError,
)
from simplifier.schemas.summary import ErrorResponse, SimplifyRequest, SummaryRecord
from simplifier.services.simplifier import SummaryOrchestrator

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = (
    "The AI service is rate-limited or out of quota right now. "
    "Please wait a moment and try again."
)
GENERIC_FAILURE_MESSAGE = "Failed to generate summary."

router = APIRouter(
    prefix="/simplify",
    tags=["simplify"],
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "",
    response_model=SummaryRecord,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def simplify(
    payload: SimplifyRequest,
    response: Response,
    llm_provider: Callable[[], LLMClient] = Depends(get_llm_provider),
):
    """
    Summarize contract/policy text into a structured plain-English brief.

    'tone' = "executive" gives a compact brief; anything else (or nothing)
    gives the verbose, educational one.
    """
    if not payload.text or not payload.text.strip():
        return _error(status.HTTP_400_BAD_REQUEST, "Missing 'text'.")

    settings = get_settings()

    try:
        orchestrator = SummaryOrchestrator(
            llm=llm_provider(),
            max_input_chars=settings.max_input_chars,
        )
        record = await orchestrator.summarize(payload.text, payload.tone)
    except LLMConfigurationError as exc:
        logger.error("/simplify configuration error: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    except LLMRateLimitError:
        logger.exception("/simplify rate limited")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, RATE_LIMIT_MESSAGE)
    except Exception:  # noqa: BLE001
        logger.exception("/simplify error")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_FAILURE_MESSAGE)

    response.headers["Cache-Control"] = "no-store"
    return record
