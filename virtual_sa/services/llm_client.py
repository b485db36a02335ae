"""
HTTP client for the NVIDIA NIM chat-completions API.

The API key is only read here; callers never see it.
"""
import time
from typing import Any, Dict, List, Optional, Tuple

import httpx
import structlog
from prometheus_client import Counter, Histogram

from ..config import Settings
from ..exceptions import MissingCredentialError, UpstreamAPIError

logger = structlog.get_logger()

LLM_REQUESTS = Counter(
    'llm_requests_total', 'Requests sent to the NVIDIA API', ['operation', 'status']
)
LLM_DURATION = Histogram(
    'llm_request_duration_seconds', 'NVIDIA API request duration', ['operation']
)

CHAT_COMPLETIONS_PATH = "v1/chat/completions"


class NvidiaClient:
    """Client for the NVIDIA API"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.NVIDIA_API_BASE_URL
        self.timeout = settings.NVIDIA_API_TIMEOUT
        self.model = settings.LLM_MODEL
        self._api_key = settings.NVIDIA_API_KEY
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        if not self._api_key:
            raise MissingCredentialError()
        return {
            'Authorization': f'Bearer {self._api_key}',
            'Content-Type': 'application/json',
        }

    async def _post(self, operation: str, path: str, payload: Any) -> httpx.Response:
        headers = self._headers()
        start_time = time.time()

        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            try:
                response = await client.post(self._url(path), json=payload, headers=headers)
            except httpx.HTTPError as e:
                LLM_REQUESTS.labels(operation=operation, status="network_error").inc()
                logger.error("NVIDIA API request failed", operation=operation, error=str(e))
                raise

        LLM_REQUESTS.labels(operation=operation, status=str(response.status_code)).inc()
        LLM_DURATION.labels(operation=operation).observe(time.time() - start_time)
        logger.info(
            "NVIDIA API call",
            operation=operation,
            path=path,
            status_code=response.status_code,
            duration=time.time() - start_time,
        )
        return response

    async def forward(self, path: str, payload: Any) -> Tuple[int, Any]:
        """
        Forward a JSON body verbatim and return the upstream status and decoded body.

        Raises MissingCredentialError when no key is configured. Network errors
        and undecodable bodies propagate to the caller.
        """
        response = await self._post("proxy", path, payload)
        return response.status_code, response.json()

    async def create_chat_completion(
        self,
        messages: List[Dict[str, str]],
        temperature: float,
        max_tokens: int,
        operation: str = "chat_completion",
        error_label: str = "NVIDIA API error",
        include_body: bool = True,
    ) -> Dict[str, Any]:
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        response = await self._post(operation, CHAT_COMPLETIONS_PATH, payload)

        if not response.is_success:
            body = response.text if include_body else ""
            logger.warning(
                "NVIDIA API returned an error",
                operation=operation,
                status_code=response.status_code,
            )
            raise UpstreamAPIError(response.status_code, body, label=error_label)

        return response.json()


def first_choice_content(completion: Dict[str, Any]) -> Optional[str]:
    """Text of the first choice, or None when the completion carries none"""
    choices = completion.get("choices") or []
    if not choices:
        return None
    message = choices[0].get("message") or {}
    return message.get("content") or None
