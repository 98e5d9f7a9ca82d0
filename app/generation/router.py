from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from app.core.llm.deps import get_groq_client
from app.core.llm.groq_client import GROQ_MODEL, GroqClient
from app.domain.exceptions import RelayConfigurationError
from app.generation.schemas import ErrorOut, GenerateIn, NormalizedResponse, WelcomeOut
from app.generation.service import GenerationService

router = APIRouter(tags=["generation"])
logger = logging.getLogger("app.generation")


def require_groq_client(
    request: Request,
    llm_client: GroqClient | None = Depends(get_groq_client),
) -> GroqClient:
    # Dependencies resolve before the body is validated, so a missing key wins over a bad body.
    if llm_client is None:
        logger.error(
            "Missing GROQ_API_KEY",
            extra={"request_id": getattr(request.state, "request_id", None)},
        )
        raise RelayConfigurationError()
    return llm_client


@router.get(
    "/",
    response_model=WelcomeOut,
    summary="Service info",
    description="Static welcome payload naming the generate endpoint and the upstream model.",
)
async def welcome() -> WelcomeOut:
    return WelcomeOut(
        message="Welcome to Tragency-AI Backend",
        endpoint="/generate",
        model=GROQ_MODEL,
    )


@router.post(
    "/generate",
    response_model=NormalizedResponse,
    summary="Generate a completion",
    description=(
        "Relays `prompt` to the Groq chat-completion API as a single user message and "
        "returns the reply wrapped in a Gemini-like `candidates` envelope. The untouched "
        "upstream body is included under `raw`.\n\n"
        "Upstream failures are forwarded with the upstream status code (500 when the "
        "upstream could not be reached) and the upstream error body under `error`."
    ),
    responses={
        400: {"model": ErrorOut, "description": "Request body has no usable `prompt`."},
        500: {"model": ErrorOut, "description": "GROQ_API_KEY is not configured."},
    },
)
async def generate(
    payload: GenerateIn,
    request: Request,
    llm_client: GroqClient = Depends(require_groq_client),
) -> NormalizedResponse:
    request_id = getattr(request.state, "request_id", None)
    service = GenerationService(llm_client=llm_client)
    return await service.generate(prompt=payload.prompt, request_id=request_id)
