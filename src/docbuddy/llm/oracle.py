"""
Text Improvement Oracle

Calls an OpenAI-compatible chat completion API to improve a single
line of documentation. One attempt per call, no retries.
"""

import logging
from typing import Dict, Optional
import requests

from ..errors import OracleError


logger = logging.getLogger(__name__)


class OpenAIOracle:
    """
    Text improvement oracle backed by a chat completion endpoint.

    Exposes improve(system_instructions, input_text), the callable
    contract the suggestion pipeline expects.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4",
        base_url: str = "https://api.openai.com/v1",
        timeout_seconds: int = 60
    ):
        """
        Initialize oracle client.

        Args:
            api_key: API key for the completion endpoint
            model: Model name
            base_url: API base URL (default: https://api.openai.com/v1)
            timeout_seconds: Per-request timeout
        """
        if not api_key:
            raise ValueError("Oracle API key is required")

        self.model = model
        self.base_url = base_url.rstrip('/')
        self.timeout_seconds = timeout_seconds
        self.session = requests.Session()
        self.session.headers.update({
            'Authorization': f'Bearer {api_key}',
            'Content-Type': 'application/json',
            'User-Agent': 'DocBuddy/1.0'
        })

    def improve(self, system_instructions: str, input_text: str) -> str:
        """
        Ask the model for an improved version of a line.

        Args:
            system_instructions: Fixed system prompt
            input_text: Line content to improve

        Returns:
            Model output text (may be empty)

        Raises:
            OracleError: For transport or API errors
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": str(system_instructions)},
                {"role": "user", "content": input_text},
            ],
        }

        try:
            response = self.session.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                timeout=self.timeout_seconds
            )
        except requests.RequestException as e:
            raise OracleError(f"Oracle request failed: {e}")

        if not response.ok:
            error_data = self._error_data(response)
            raise OracleError(
                f"Oracle API error: {response.status_code} - {error_data.get('message', 'Unknown error')}",
                status_code=response.status_code
            )

        return self._extract_text(response.json())

    def __call__(self, system_instructions: str, input_text: str) -> str:
        return self.improve(system_instructions, input_text)

    def _extract_text(self, data: Dict) -> str:
        """Pull the first choice's message content out of a completion response."""
        choices = data.get("choices") or []
        if not choices:
            logger.warning("Oracle returned no choices")
            return ""

        message = choices[0].get("message") or {}
        return message.get("content") or ""

    def _error_data(self, response: requests.Response) -> Dict:
        try:
            data = response.json() if response.content else {}
        except ValueError:
            return {}
        error: Optional[Dict] = data.get("error") if isinstance(data, dict) else None
        return error if isinstance(error, dict) else {}
