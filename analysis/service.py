"""
Natural-language analysis of a student dataset through the Gemini API.
The whole dataset is sent as JSON next to the question; the model answers
with a JSON object (answer, optional calculation summary, optional chart).
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types

from .schemas import RESPONSE_SCHEMA, coerce_analysis_response

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

APOLOGY_ANSWER = (
    "I encountered an error during inference. Please verify that your API key is correctly set in the "
    "environment variables and try again."
)

SYSTEM_INSTRUCTION = """
You are a Senior Data Analyst for AIRR (AI Transcript Processing).
You have access to a student dataset. Your goal is to:
1. Answer natural language questions about the data.
2. Perform calculations (averages, counts, distributions).
3. Suggest and provide data for a visualization if the query warrants it.

Data Schema:
- id, name, age, city, state, schoolName, schoolType, schoolState, schoolCity, cumulativeGpa, unweightedGpa, weightedGpa, rigorCoursesCount, creditsEarned, majorInterest, graduationYear.

Return a valid JSON object.
"""


class GeminiClient:
    """Thin wrapper around the google-genai client."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL) -> None:
        self.model_name = model
        self._client = genai.Client(api_key=api_key)

    @classmethod
    def from_env(cls) -> Optional["GeminiClient"]:
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
        if not api_key:
            return None
        return cls(api_key=api_key, model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL))

    def generate_json(self, contents: List[str]) -> Any:
        config = types.GenerateContentConfig(
            system_instruction=SYSTEM_INSTRUCTION,
            response_mime_type="application/json",
            response_schema=RESPONSE_SCHEMA,
        )
        response = self._client.models.generate_content(
            model=self.model_name,
            contents=contents,
            config=config,
        )
        return json.loads(response.text or "{}")


def build_contents(query: str, records: List[Dict[str, Any]]) -> List[str]:
    return [
        f"Current Dataset (JSON): {json.dumps(records)}",
        f"User Query: {query}",
    ]


def analyze_data(query: str, records: List[Dict[str, Any]], client=None) -> Dict[str, Any]:
    """Ask the model about ``records``; never raises.

    ``client`` needs a ``generate_json(contents)`` method and defaults to a
    GeminiClient configured from the environment.
    """
    try:
        if client is None:
            client = GeminiClient.from_env()
        if client is None:
            raise RuntimeError("GEMINI_API_KEY is not set")
        raw = client.generate_json(build_contents(query, records))
        return coerce_analysis_response(raw)
    except Exception as e:
        logger.warning("Gemini analysis error: %s", e)
        return {"answer": APOLOGY_ANSWER}
