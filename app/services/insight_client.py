# services/insight_client.py
import logging
from typing import Optional

import openai
from openai import OpenAI

from app.core.config import settings
from app.core.exceptions import InsightGenerationError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful personal development coach. "
    "Always respond with valid JSON only, no markdown or extra text."
)


class InsightClient:
    """
    Thin wrapper over an OpenAI-compatible chat completion endpoint
    (OpenRouter by default).

    One request per call, no retries. Every failure surfaces as
    InsightGenerationError so callers only handle one exception.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.OPENROUTER_API_KEY
        self.model = model or settings.INSIGHT_MODEL
        self.base_url = base_url or settings.OPENROUTER_BASE_URL
        self.timeout = timeout or settings.INSIGHT_TIMEOUT_SECONDS
        self._client: Optional[OpenAI] = None

    def _get_client(self) -> OpenAI:
        if not self.api_key:
            logger.warning("OPENROUTER_API_KEY is not set, insights are disabled")
            raise InsightGenerationError("Insight generation is not configured")

        if self._client is None:
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    def complete(self, prompt: str) -> str:
        """
        Send one prompt and return the raw reply text.

        Raises:
            InsightGenerationError: Missing key, transport error, timeout,
                non-2xx status or empty reply
        """
        client = self._get_client()
        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=0.7,
                max_tokens=1000,
                extra_headers={
                    "HTTP-Referer": settings.APP_URL,
                    "X-Title": "FutureYou",
                },
            )
        except openai.APITimeoutError as exc:
            logger.warning(f"Insight request timed out after {self.timeout}s")
            raise InsightGenerationError("The insight service timed out, please try again later") from exc
        except openai.APIStatusError as exc:
            logger.error(f"Insight request failed with status {exc.status_code}: {exc.message}")
            raise InsightGenerationError(f"The insight service returned an error ({exc.status_code})") from exc
        except openai.APIError as exc:
            logger.error(f"Insight request failed: {exc}")
            raise InsightGenerationError("Could not reach the insight service") from exc

        if not response.choices or not response.choices[0].message.content:
            raise InsightGenerationError("The insight service returned an empty reply")
        return response.choices[0].message.content


_insight_client: Optional[InsightClient] = None


def get_insight_client() -> InsightClient:
    """FastAPI dependency; tests override it with a fake."""
    global _insight_client
    if _insight_client is None:
        _insight_client = InsightClient()
    return _insight_client
