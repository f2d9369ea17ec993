"""
Client for the Gemini ``generateContent`` REST endpoint.

The client sends one prompt per call and returns the text of the first
candidate. A single attempt is made: transport errors, timeouts, malformed
bodies, API error descriptors and empty replies all raise
:class:`LLMError`.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from genie_fun.config.loader import DEFAULT_REQUEST_TIMEOUT, GEMINI_ENDPOINT


logger = logging.getLogger(__name__)
# Attach a null handler to avoid errors when the root logger is missing a
# stream. Messages will still propagate to the root logger if configured.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


EMPTY_RESPONSE_MESSAGE = "no response from Gemini API"


class LLMError(Exception):
    """Raised when communication with the language model fails.

    When the failure comes from an error descriptor in the API reply,
    ``code`` and ``api_message`` hold its fields.
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        api_message: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.api_message = api_message


@dataclass
class GenerationRequest:
    """A single-turn, single-part prompt."""

    prompt: str

    def to_payload(self) -> Dict[str, Any]:
        return {"contents": [{"parts": [{"text": self.prompt}]}]}


@dataclass
class ErrorInfo:
    code: int
    message: str


class ResponseKind(enum.Enum):
    TEXT = "text"
    ERROR = "error"
    EMPTY = "empty"


@dataclass
class GenerationResponse:
    """Decoded reply from ``generateContent``.

    Attributes
    ----------
    candidates : List[List[str]]
        Text parts of each candidate, in reply order.
    error : ErrorInfo, optional
        The error descriptor, if the reply carried one.
    """

    candidates: List[List[str]] = field(default_factory=list)
    error: Optional[ErrorInfo] = None

    @classmethod
    def from_json(cls, data: Any) -> "GenerationResponse":
        """Build a response from a decoded JSON body.

        Unknown fields are ignored and missing ones are treated as empty.
        A body that is not an object, or whose ``candidates`` or ``parts``
        are not lists, raises :class:`LLMError`.
        """
        if not isinstance(data, dict):
            raise LLMError("Unexpected response structure from Gemini API")

        error = None
        raw_error = data.get("error")
        if isinstance(raw_error, dict):
            code = raw_error.get("code")
            error = ErrorInfo(
                code=code if isinstance(code, int) else 0,
                message=str(raw_error.get("message") or ""),
            )

        raw_candidates = data.get("candidates") or []
        if not isinstance(raw_candidates, list):
            raise LLMError("Unexpected response structure from Gemini API")

        candidates: List[List[str]] = []
        for raw_candidate in raw_candidates:
            content = raw_candidate.get("content") if isinstance(raw_candidate, dict) else None
            parts = (content.get("parts") if isinstance(content, dict) else None) or []
            if not isinstance(parts, list):
                raise LLMError("Unexpected response structure from Gemini API")
            texts = []
            for part in parts:
                if isinstance(part, dict):
                    texts.append(str(part.get("text") or ""))
            candidates.append(texts)

        return cls(candidates=candidates, error=error)

    @property
    def kind(self) -> ResponseKind:
        if self.error is not None:
            return ResponseKind.ERROR
        if not self.candidates or not self.candidates[0]:
            return ResponseKind.EMPTY
        return ResponseKind.TEXT

    @property
    def text(self) -> Optional[str]:
        """First text part of the first candidate, if the reply has one."""
        if self.kind is not ResponseKind.TEXT:
            return None
        return self.candidates[0][0]


@dataclass
class GeminiClient:
    """Client for the Gemini REST API.

    Parameters
    ----------
    api_key : str
        API key, sent as the ``key`` query parameter.
    endpoint : str, optional
        Full ``generateContent`` URL. Defaults to the gemini-2.0-flash model.
    request_timeout : float, optional
        Timeout in seconds for the HTTP request. Defaults to 30 seconds.
    """

    api_key: str
    endpoint: str = GEMINI_ENDPOINT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def _redact(self, text: str) -> str:
        if not self.api_key:
            return text
        return text.replace(self.api_key, "***")

    def send(self, request: GenerationRequest) -> GenerationResponse:
        """POST ``request`` and decode the reply, whatever its status code.

        Raises
        ------
        LLMError
            If the request fails or the body is not valid JSON.
        """
        logger.debug("Sending request to Gemini at %s", self.endpoint)
        try:
            response = requests.post(
                self.endpoint,
                params={"key": self.api_key},
                json=request.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.request_timeout,
            )
        except requests.RequestException as exc:
            # The request URL, key included, is part of the exception text.
            reason = self._redact(str(exc))
            logger.error("Failed to reach Gemini API: %s", reason)
            raise LLMError(reason) from exc

        logger.debug("Gemini API returned status %s", response.status_code)
        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Failed to parse Gemini response: %s", exc)
            if response.status_code != 200:
                raise LLMError(
                    f"Gemini API returned status {response.status_code}: {self._redact(response.text)}"
                ) from exc
            raise LLMError("Failed to parse Gemini response") from exc
        return GenerationResponse.from_json(data)

    def generate(self, prompt: str) -> str:
        """Generate text for ``prompt``.

        Returns
        -------
        str
            The first text part of the first candidate, unmodified.

        Raises
        ------
        LLMError
            If the request fails, the API reports an error, or the reply
            contains no text.
        """
        reply = self.send(GenerationRequest(prompt=prompt))
        kind = reply.kind
        if kind is ResponseKind.ERROR:
            assert reply.error is not None
            logger.error("Gemini API error %s: %s", reply.error.code, reply.error.message)
            raise LLMError(
                f"API error: {reply.error.message}",
                code=reply.error.code,
                api_message=reply.error.message,
            )
        if kind is ResponseKind.EMPTY:
            logger.error("Gemini API returned no candidates")
            raise LLMError(EMPTY_RESPONSE_MESSAGE)
        return reply.text or ""
