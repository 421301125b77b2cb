"""Rewrite service: send a responsibility to a local LLM (Ollama) and return a polished description."""

import json
import logging
import time
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, Field, ValidationError

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

MAX_REWRITE_CHARS = 2000


class RewriteServiceError(Exception):
    """
    Raised when a rewrite cannot complete.

    kind: 'unavailable' (unreachable or timed out), 'upstream' (bad status or
    body from Ollama) or 'invalid_output' (model text did not match the shape).
    """

    def __init__(self, message: str, kind: str, cause: Exception | None = None) -> None:
        self.message = message
        self.kind = kind
        self.cause = cause
        super().__init__(message)


class RewriteOutput(BaseModel):
    """Shape the model must return."""

    rewritten: str = Field(..., min_length=1, max_length=MAX_REWRITE_CHARS)


def _build_prompt(
    responsibility_name: str,
    pd_title: str | None,
    percentage: float | None,
) -> str:
    context = {
        "position_title": pd_title or "",
        "responsibility": responsibility_name,
        "time_share_percent": percentage,
    }
    return f"""You are an HR writer improving position descriptions. Rewrite the responsibility below as one clear, specific sentence or short paragraph in plain professional English. Keep the meaning; do not invent duties.

Responsibility (JSON):
{json.dumps(context, indent=2)}

Respond with ONLY a single valid JSON object (no markdown, no code fence, no extra text) of exactly this shape:
{{"rewritten": "<the rewritten responsibility>"}}"""


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if not text.startswith("```"):
        return text
    lines = text.split("\n")[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)


def _log_failure(settings: "Settings", elapsed: float) -> None:
    logger.info(
        "LLM rewrite request failed",
        extra={
            "llm_latency_seconds": elapsed,
            "model": settings.OLLAMA_MODEL,
            "status": "error",
        },
    )


async def rewrite_responsibility(
    responsibility_name: str,
    settings: "Settings",
    pd_title: str | None = None,
    percentage: float | None = None,
) -> str:
    """
    Ask Ollama for a rewritten responsibility and return the text.

    Raises RewriteServiceError on connection failure, timeout, bad status or
    output that does not match RewriteOutput.
    """
    url = f"{settings.OLLAMA_BASE_URL.rstrip('/')}/api/generate"
    payload = {
        "model": settings.OLLAMA_MODEL,
        "prompt": _build_prompt(responsibility_name, pd_title, percentage),
        "stream": False,
        "format": "json",
        "options": {"temperature": settings.OLLAMA_TEMPERATURE},
    }
    timeout = httpx.Timeout(settings.OLLAMA_REQUEST_TIMEOUT_SEC)
    start = time.perf_counter()

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(url, json=payload)
    except httpx.ConnectError as e:
        _log_failure(settings, time.perf_counter() - start)
        raise RewriteServiceError(
            "Ollama is unreachable. Ensure Ollama is running and OLLAMA_BASE_URL is correct.",
            kind="unavailable",
            cause=e,
        ) from e
    except httpx.TimeoutException as e:
        _log_failure(settings, time.perf_counter() - start)
        raise RewriteServiceError(
            "Ollama request timed out. Try increasing OLLAMA_REQUEST_TIMEOUT_SEC.",
            kind="unavailable",
            cause=e,
        ) from e
    except httpx.HTTPError as e:
        _log_failure(settings, time.perf_counter() - start)
        raise RewriteServiceError("Ollama request failed.", kind="upstream", cause=e) from e
    elapsed = time.perf_counter() - start

    if response.status_code != 200:
        raise RewriteServiceError(
            f"Ollama returned status {response.status_code}. Check that the model is pulled (e.g. ollama pull {settings.OLLAMA_MODEL}).",
            kind="upstream",
        )

    try:
        body = response.json()
    except json.JSONDecodeError as e:
        raise RewriteServiceError(
            "Ollama response body is not valid JSON.", kind="upstream", cause=e
        ) from e

    logger.info(
        "LLM rewrite request completed",
        extra={"llm_latency_seconds": elapsed, "model": settings.OLLAMA_MODEL},
    )

    raw = body.get("response")
    if raw is None:
        raise RewriteServiceError("Ollama response missing 'response' field.", kind="upstream")

    if isinstance(raw, str):
        try:
            parsed = json.loads(_strip_code_fence(raw))
        except json.JSONDecodeError as e:
            raise RewriteServiceError(
                "Invalid JSON from model. The model must respond with only valid JSON.",
                kind="invalid_output",
                cause=e,
            ) from e
    else:
        parsed = raw

    if not isinstance(parsed, dict):
        raise RewriteServiceError("Model output is not a JSON object.", kind="invalid_output")

    try:
        output = RewriteOutput.model_validate(parsed)
    except ValidationError as e:
        raise RewriteServiceError(
            "Model output does not match expected schema (rewritten).",
            kind="invalid_output",
            cause=e,
        ) from e
    return output.rewritten.strip()
