"""Async client for an OpenAI-compatible chat-completion endpoint.

Targets OpenRouter by default; any endpoint that speaks the OpenAI chat
API works by changing ``ClientSettings.base_url``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, TypeVar

from openai import AsyncOpenAI, RateLimitError

from buildcost.schemas.config import ClientSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

RateLimitPredicate = Callable[[BaseException], bool]
"""Decides whether a failed call was throttled and is worth retrying."""

SleepFn = Callable[[float], Awaitable[Any]]


def is_rate_limit_error(exc: BaseException) -> bool:
    """Default throttling check.

    True for the SDK's ``RateLimitError``, an HTTP 429 status, the
    ``rate_limit_exceeded`` error code, or a message mentioning "rate limit".
    """
    if isinstance(exc, RateLimitError):
        return True
    if getattr(exc, "status_code", None) == 429 or getattr(exc, "status", None) == 429:
        return True
    if getattr(exc, "code", None) == "rate_limit_exceeded":
        return True
    return "rate limit" in str(exc).lower()


async def retry_with_backoff(
    fn: Callable[[], Awaitable[T]],
    *,
    max_retries: int = 5,
    base_delay: float = 2.0,
    is_rate_limited: RateLimitPredicate = is_rate_limit_error,
    sleep: SleepFn = asyncio.sleep,
) -> T:
    """Await ``fn()``, retrying throttled calls with exponential backoff.

    Waits ``base_delay * 2**attempt`` seconds between attempts (2, 4, 8,
    16, 32 s with the defaults). Errors that are not rate limits are
    re-raised at once. Once ``max_retries`` retries are spent the last
    error is re-raised; ``max_retries=0`` means a single attempt.
    """
    attempt = 0
    while True:
        try:
            return await fn()
        except Exception as exc:
            if not is_rate_limited(exc) or attempt >= max_retries:
                raise
            delay = base_delay * (2 ** attempt)
            logger.warning(
                "Rate limit hit, retrying in %.1fs (attempt %d/%d): %s",
                delay, attempt + 1, max_retries + 1, exc,
            )
            await sleep(delay)
            attempt += 1


class LLMClient:
    """Thin async wrapper around the OpenAI SDK.

    Provides two methods:
    - ``json_completion`` — one user prompt, JSON-object output requested.
    - ``chat_completion`` — an ordered message list, plain text output.

    Both go through ``retry_with_backoff``.
    """

    def __init__(
        self,
        settings: ClientSettings,
        *,
        is_rate_limited: RateLimitPredicate = is_rate_limit_error,
    ) -> None:
        self.settings = settings
        self._is_rate_limited = is_rate_limited
        self._client = AsyncOpenAI(
            base_url=settings.base_url,
            # An empty key is sent as-is so a missing credential fails at request time.
            api_key=settings.api_key,
            timeout=settings.timeout,
        )

    async def _call_with_retry(self, **kwargs: Any) -> Any:
        return await retry_with_backoff(
            lambda: self._client.chat.completions.create(**kwargs),
            max_retries=self.settings.max_retries,
            base_delay=self.settings.base_delay,
            is_rate_limited=self._is_rate_limited,
        )

    async def json_completion(self, *, prompt: str) -> str:
        """Single user prompt; the reply is expected to be a JSON object.

        Returns ``"{}"`` when the response carries no content.
        """
        response = await self._call_with_retry(
            model=self.settings.model,
            messages=[{"role": "user", "content": prompt}],
            response_format={"type": "json_object"},
            stream=False,
        )
        return _first_content(response) or "{}"

    async def chat_completion(self, *, messages: list[dict[str, str]]) -> str:
        """Send a full conversation; returns the reply text or ``""``."""
        response = await self._call_with_retry(
            model=self.settings.model,
            messages=messages,
            stream=False,
        )
        return _first_content(response) or ""


def _first_content(response: Any) -> str | None:
    choices = getattr(response, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None)


# ======================================================================
# Dry-run mock client — zero API calls
# ======================================================================

_DRY_RUN_FEASIBILITY = json.dumps({
    "isValid": True,
    "budgetVerdict": "Realistic",
    "issues": [],
    "suggestions": ["Manpower sufficient: 12 workers can complete in 10 months."],
})


def _dry_run_estimate(months: int) -> str:
    monthly = round(250_000 / months, 2)
    return json.dumps({
        "currencySymbol": "$",
        "totalEstimatedCost": 250_000,
        "breakdown": [
            {"category": "Labor & Wages", "cost": 90_000, "description": "Crew wages over the build"},
            {"category": "Materials", "cost": 120_000, "description": "Structure and finishes"},
            {"category": "Contingency", "cost": 40_000, "description": "Allowance for unknowns"},
        ],
        "cashflow": [
            {"month": m, "amount": monthly, "phase": "Construction"}
            for m in range(1, months + 1)
        ],
        "risks": [
            {"risk": "Material price increases", "impact": "Medium", "mitigation": "Lock supplier quotes early"},
        ],
        "confidenceScore": 80,
        "confidenceReason": "Dry run: canned figures, not a real estimate.",
        "efficiencyTips": ["Order long-lead items in month 1."],
        "summary": "Dry-run estimate.",
    })


class DryRunClient:
    """Drop-in replacement for LLMClient that makes zero API calls."""

    async def json_completion(self, *, prompt: str) -> str:
        if "chartered surveyor" in prompt:
            return _dry_run_estimate(_timeline_from_prompt(prompt))
        return _DRY_RUN_FEASIBILITY

    async def chat_completion(self, *, messages: list[dict[str, str]]) -> str:
        last = messages[-1]["content"] if messages else ""
        return f"[dry-run] You said: {last}"


def _timeline_from_prompt(prompt: str) -> int:
    """Pull the month count back out of the estimate prompt."""
    for line in prompt.splitlines():
        line = line.strip()
        if line.startswith("- Project Timeline:"):
            try:
                return max(1, int(line.split(":", 1)[1].split()[0]))
            except (IndexError, ValueError):
                break
    return 12
