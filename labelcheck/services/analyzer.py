import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from labelcheck.core.config import Settings, get_settings
from labelcheck.core.errors import (
    ConfigurationError,
    EmptyResponseError,
    ExtractionError,
    UpstreamError,
)
from labelcheck.core.prompts import CHECKLIST_PROMPT
from labelcheck.schemas.analysis import ComplianceResult
from labelcheck.services.extraction import extract_json

logger = logging.getLogger("labelcheck.analyzer")

UPSTREAM_FAILURE = "Failed to get a response from the AI service."
EMPTY_RESPONSE = "The AI returned an empty response."


class ComplianceAnalyzer:
    """
    Gemini-backed food label checker.

    Sends the checklist prompt and the inline image to ``generateContent``
    and returns the JSON array found in the model's text. No retries: any
    failure raises an AnalysisError subclass and ends the analysis.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.prompt = CHECKLIST_PROMPT

    def build_payload(self, image_base64: str, mime_type: str) -> Dict[str, Any]:
        return {
            "contents": [{
                "parts": [
                    {"text": self.prompt},
                    {"inline_data": {"mime_type": mime_type, "data": image_base64}},
                ]
            }]
        }

    def analyze(self, image_base64: str, mime_type: str) -> Any:
        if not self.settings.GEMINI_API_KEY:
            raise ConfigurationError("GEMINI_API_KEY is not configured.")

        response_data = self._generate(self.build_payload(image_base64, mime_type))

        text = self._response_text(response_data)
        if not text:
            raise EmptyResponseError(EMPTY_RESPONSE)

        try:
            results = extract_json(text)
        except ExtractionError:
            logger.error(f"Could not extract JSON from AI response: {text[:1000]!r}")
            raise

        self._warn_on_shape(results)
        return results

    def _generate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Calling Gemini model {self.settings.GEMINI_MODEL}...")
        try:
            response = requests.post(
                self.settings.generate_url,
                params={"key": self.settings.GEMINI_API_KEY},
                json=payload,
                timeout=self.settings.GEMINI_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.error(f"Gemini request failed: {e}")
            raise UpstreamError(f"{UPSTREAM_FAILURE} ({e.__class__.__name__})") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.ok:
            logger.error(f"Gemini API Error ({response.status_code}): {data if data is not None else response.text[:500]}")
            message = None
            if isinstance(data, dict) and isinstance(data.get("error"), dict):
                message = data["error"].get("message")
            raise UpstreamError(message or UPSTREAM_FAILURE, status_code=response.status_code)

        if not isinstance(data, dict):
            raise EmptyResponseError(EMPTY_RESPONSE)
        return data

    @staticmethod
    def _response_text(data: Dict[str, Any]) -> Optional[str]:
        """candidates[0].content.parts[0].text, or None anywhere along the way"""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) and text.strip() else None

    @staticmethod
    def _warn_on_shape(results: Any) -> None:
        # Results are returned as-is; deviations are only reported.
        if not isinstance(results, list):
            logger.warning(f"AI returned a {type(results).__name__}, expected a list")
            return
        problems: List[str] = []
        for index, item in enumerate(results):
            try:
                ComplianceResult.model_validate(item)
            except ValidationError as e:
                problems.append(f"item {index}: {e.error_count()} field error(s)")
        if problems:
            logger.warning(f"AI results deviate from the expected shape: {'; '.join(problems)}")


compliance_analyzer = ComplianceAnalyzer(get_settings())


def get_analyzer() -> ComplianceAnalyzer:
    return compliance_analyzer
