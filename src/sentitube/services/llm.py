"""LLM services for comment sentiment classification."""

import hashlib
import json
import logging
import re
from typing import Any, Dict, Optional

import openai
from diskcache import Cache
from google import genai
from google.genai import types
from tenacity import retry, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import AnalysisMessages, CacheConstants, PromptConstants
from ..core.models import Sentiment

logger = logging.getLogger(__name__)


def _stop_after_configured_attempts(retry_state) -> bool:
    return stop_after_attempt(max(1, settings.llm_max_retries))(retry_state)


def _configured_wait(retry_state) -> float:
    return wait_exponential(multiplier=settings.retry_delay, max=settings.retry_backoff * 10)(retry_state)


# settings are read on every call
_retry_policy = retry(
    stop=_stop_after_configured_attempts,
    wait=_configured_wait,
    reraise=True,
)


def build_prompt(comment: str) -> str:
    """Fill the classification template with one comment."""
    return PromptConstants.SENTIMENT_PROMPT.format(comment=comment)


def _strip_code_fences(s: str) -> str:
    s = s.strip()
    return re.sub(r"^```(?:json)?|```$", "", s, flags=re.IGNORECASE | re.MULTILINE).strip()


def _safe_json_loads(s: str):
    """Parse a JSON object from an LLM reply, tolerating fences and surrounding prose."""
    cleaned = _strip_code_fences(s or "")
    try:
        return json.loads(cleaned)
    except ValueError:
        obj_match = re.search(r"\{.*\}", cleaned, re.S)
        if obj_match:
            return json.loads(obj_match.group(0))
        raise


def _fallback(analysis: str) -> Dict[str, Any]:
    return {"sentiment": Sentiment.NEUTRAL, "analysis": analysis}


def parse_sentiment_reply(reply: str) -> Dict[str, Any]:
    """Turn a raw model reply into ``{"sentiment": Sentiment, "analysis": str}``.

    Never raises: unparseable replies, missing fields and unknown labels all
    become a neutral result with a diagnostic rationale.
    """
    try:
        parsed = _safe_json_loads(reply)
    except ValueError as e:
        logger.error(f"Error parsing JSON: {e}. Response: {(reply or '')[:200]}")
        return _fallback(AnalysisMessages.PARSE_ERROR)

    if not isinstance(parsed, dict) or not parsed.get("sentiment") or not parsed.get("analysis"):
        logger.error(f"Invalid response format: {parsed}")
        return _fallback(AnalysisMessages.INVALID_FORMAT)

    analysis = str(parsed["analysis"])
    label = str(parsed["sentiment"]).strip().lower()
    try:
        sentiment = Sentiment(label)
    except ValueError:
        logger.warning(f"Unknown sentiment label {label!r}, using neutral")
        return _fallback(analysis)

    return {"sentiment": sentiment, "analysis": analysis}


class LLMServiceFactory:
    """Factory for creating LLM services."""

    @staticmethod
    def create():
        """Create the LLM service selected by configuration."""
        provider = (settings.llm_provider or "auto").lower()
        if provider == "gemini" or (provider == "auto" and settings.gemini_api_key):
            return GeminiService()
        if provider == "openai" or (provider == "auto" and settings.effective_openai_key):
            return OpenAIService()
        return FallbackLLMService()


class PromptedLLMService:
    """Shared classification flow for services backed by a remote model."""

    model: str = ""

    def __init__(self):
        self.cache: Optional[Cache] = Cache(settings.cache_dir) if settings.llm_cache_enabled else None

    def generate(self, prompt: str) -> str:
        raise NotImplementedError

    def chat(self, prompt: str) -> str:
        """Send one prompt, consulting the reply cache when enabled."""
        cache_key = hashlib.md5(f"{self.model}|{prompt}".encode()).hexdigest()
        if self.cache is not None:
            cached_response = self.cache.get(cache_key)
            if cached_response:
                logger.debug(f"Cache hit for LLM request: {cache_key[:CacheConstants.CACHE_KEY_LENGTH]}...")
                return cached_response

        result = self.generate(prompt)

        if self.cache is not None and result:
            self.cache.set(cache_key, result, expire=3600 * settings.cache_ttl_hours)
        return result

    def classify_comment(self, text: str) -> Dict[str, Any]:
        """Classify one comment as agree, disagree or neutral. Never raises."""
        logger.debug(f"Analyzing comment: {text[:80]!r}")
        try:
            reply = self.chat(build_prompt(text))
        except Exception as e:
            logger.error(f"Error calling {type(self).__name__}: {e}")
            return _fallback(AnalysisMessages.CALL_ERROR)

        logger.debug(f"Model response: {reply!r}")
        return parse_sentiment_reply(reply)


class GeminiService(PromptedLLMService):
    """Gemini-based LLM service."""

    def __init__(self):
        super().__init__()
        self.model = settings.gemini_model
        self.client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=int(settings.llm_timeout * 1000)),
        )
        self.config = types.GenerateContentConfig(
            response_mime_type="application/json",
            temperature=PromptConstants.TEMPERATURE,
            max_output_tokens=PromptConstants.MAX_TOKENS,
        )
        logger.info(f"Gemini service initialized with model {self.model}")

    @_retry_policy
    def generate(self, prompt: str) -> str:
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=self.config,
        )
        return (response.text or "").strip()


class OpenAIService(PromptedLLMService):
    """OpenAI-based LLM service."""

    def __init__(self):
        super().__init__()
        self.model = settings.openai_model
        self.client = openai.OpenAI(api_key=settings.effective_openai_key)
        logger.info(f"OpenAI service initialized with model {self.model}")

    @_retry_policy
    def generate(self, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=PromptConstants.MAX_TOKENS,
            temperature=PromptConstants.TEMPERATURE,
            timeout=settings.llm_timeout,
        )
        return (response.choices[0].message.content or "").strip()


class FallbackLLMService:
    """Fallback LLM service using simple rules."""

    model = "keyword-rules"

    AGREE_WORDS = ["agree", "exactly", "true", "right", "love", "great", "thank", "best", "helpful"]
    DISAGREE_WORDS = ["disagree", "wrong", "false", "misleading", "hate", "worst", "nonsense", "bad"]

    def __init__(self):
        logger.info("Using fallback LLM service")

    def classify_comment(self, text: str) -> Dict[str, Any]:
        """Simple keyword-based classification."""
        text_lower = (text or "").lower()
        agree = sum(1 for word in self.AGREE_WORDS if re.search(rf"\b{word}", text_lower))
        disagree = sum(1 for word in self.DISAGREE_WORDS if re.search(rf"\b{word}", text_lower))

        if agree > disagree:
            return {"sentiment": Sentiment.AGREE, "analysis": "Keyword match: supportive wording"}
        if disagree > agree:
            return {"sentiment": Sentiment.DISAGREE, "analysis": "Keyword match: critical wording"}
        return {"sentiment": Sentiment.NEUTRAL, "analysis": "Keyword match: no clear stance"}
