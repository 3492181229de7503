from app.core.config import settings
from app.core.exceptions import InferenceError, InferenceNotConfiguredError
import requests
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class InferenceService:
    """Single-turn text completion using the Google Generative AI (Gemini) API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """Initialize the inference service."""
        self.api_key = api_key if api_key is not None else settings.google_gemini_api_key
        self.model_name = model_name or settings.gemini_model
        self.timeout = timeout if timeout is not None else settings.inference_timeout_seconds
        self.base_url = f"https://generativelanguage.googleapis.com/v1beta/models/{self.model_name}:generateContent"

        logger.info(f"InferenceService initialized. Model: {self.model_name}, API key present: {bool(self.api_key)}")
        if not self.api_key:
            logger.warning("Google Gemini API key not configured. Language name inference will fail.")

    def complete(self, prompt: str) -> str:
        """
        Send one user-role prompt and return the model's text response.

        Args:
            prompt: The user prompt

        Returns:
            The generated text, untrimmed

        Raises:
            InferenceNotConfiguredError: If no API key is configured
            InferenceError: If the request fails or the response carries no text
        """
        if not self.api_key:
            raise InferenceNotConfiguredError("Google Gemini API key not configured")

        payload = {
            "contents": [{
                "role": "user",
                "parts": [{
                    "text": prompt
                }]
            }],
            "generationConfig": {
                "temperature": 0.0,
                "maxOutputTokens": 64,
            }
        }

        logger.debug(f"POST {self.base_url} prompt: {prompt[:200]}...")

        try:
            response = requests.post(
                self.base_url,
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            error_msg = f"Gemini API request failed: {str(e)}"
            if getattr(e, 'response', None) is not None:
                error_msg += f" - Status: {e.response.status_code}"
            raise InferenceError(error_msg) from e
        except ValueError as e:
            raise InferenceError(f"Gemini API returned invalid JSON: {str(e)}") from e

        candidates = data.get('candidates') or []
        if not candidates:
            raise InferenceError("LLM response missing candidates")

        parts = candidates[0].get('content', {}).get('parts') or []
        if not parts:
            raise InferenceError("LLM response missing content or parts")

        text = parts[0].get('text', '')
        if not text.strip():
            raise InferenceError("LLM returned empty response")
        return text


# Process-wide instance, created lazily
_inference_service: Optional[InferenceService] = None


def get_inference_service() -> InferenceService:
    """Dependency for getting the shared inference service."""
    global _inference_service
    if _inference_service is None:
        _inference_service = InferenceService()
    return _inference_service
