"""
Pass-through proxy to the NVIDIA API.

Responses use a flat ``{"error": "..."}`` body so browser clients written
against the hosted NVIDIA endpoint can read them unchanged.
"""
import json

import httpx
import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..dependencies import get_nvidia_client
from ..exceptions import MissingCredentialError
from ..services.llm_client import CHAT_COMPLETIONS_PATH, NvidiaClient

logger = structlog.get_logger()
router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

MISSING_KEY_ERROR = "NVIDIA API key not configured"


async def _proxy(
    request: Request,
    client: NvidiaClient,
    path: str,
    method_not_allowed: str,
    failure_status: int,
    failure_message: str,
) -> JSONResponse:
    if request.method != "POST":
        return JSONResponse(status_code=405, content={"error": method_not_allowed})

    try:
        raw = await request.body()
        payload = json.loads(raw) if raw else None
        status_code, body = await client.forward(path, payload)
    except MissingCredentialError:
        logger.error("Proxy request without configured NVIDIA API key", path=path)
        return JSONResponse(status_code=500, content={"error": MISSING_KEY_ERROR})
    except (httpx.HTTPError, ValueError) as e:
        logger.error("NVIDIA API proxy error", path=path, error=str(e))
        return JSONResponse(status_code=failure_status, content={"error": failure_message})

    return JSONResponse(status_code=status_code, content=body)


@router.api_route(
    "/v1/chat/completions",
    methods=ALL_METHODS,
    summary="Proxy chat completions",
    description="Forward a chat-completions request to the NVIDIA API with the server-held key",
)
async def proxy_chat_completions(
    request: Request,
    client: NvidiaClient = Depends(get_nvidia_client),
):
    return await _proxy(
        request,
        client,
        CHAT_COMPLETIONS_PATH,
        method_not_allowed="Method Not Allowed",
        failure_status=500,
        failure_message="Failed to proxy request to NVIDIA",
    )


@router.api_route(
    "/{path:path}",
    methods=ALL_METHODS,
    summary="Proxy any NVIDIA API path",
    description="Forward a POST body to the same path on the NVIDIA API",
)
async def proxy_path(
    path: str,
    request: Request,
    client: NvidiaClient = Depends(get_nvidia_client),
):
    return await _proxy(
        request,
        client,
        path,
        method_not_allowed="Method not allowed",
        failure_status=502,
        failure_message="Failed to proxy request to NVIDIA API",
    )
