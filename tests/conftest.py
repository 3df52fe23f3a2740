# Test configuration and fixtures
import json
import os
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from labelcheck.core.config import Settings  # noqa: E402


@pytest.fixture(scope="session")
def sample_results():
    """Two checklist verdicts in the shape the model is asked for"""
    return [
        {
            "id": 1,
            "question": "Product name is clearly stated",
            "findings": "'Golden Oat Crunch' is printed across the front panel.",
            "compliance": "Pass",
            "result": "Pass",
            "confidence": 5
        },
        {
            "id": 2,
            "question": "Net weight or volume is shown",
            "findings": "No net quantity visible.",
            "compliance": "Fail",
            "result": "Fail",
            "confidence": 3
        }
    ]


@pytest.fixture(scope="session")
def sample_ai_text(sample_results):
    """Model answer wrapped in a markdown code fence"""
    return f"```json\n{json.dumps(sample_results, indent=2)}\n```"


@pytest.fixture
def test_settings():
    return Settings(
        gemini_api_key="test-key",
        gemini_model="gemini-test",
        gemini_api_base="https://gemini.test/v1beta",
    )


@pytest.fixture
def gemini_envelope():
    """Build a generateContent success body carrying the given text"""
    def _envelope(text):
        return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}
    return _envelope
