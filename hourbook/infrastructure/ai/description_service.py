"""
Chat-completion client that drafts billable descriptions and invoice notes.

The service never raises for provider problems: every failure is reported
through AiDescriptionResult so callers can show a message and carry on.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from hourbook.config import Settings, get_settings


logger = logging.getLogger(__name__)


class AiErrorCode(str, Enum):
    DISABLED = "DISABLED"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    INVALID_PROMPT = "INVALID_PROMPT"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


ERROR_MESSAGES = {
    AiErrorCode.DISABLED: "AI description assistance is disabled. Ask your administrator to enable it in configuration.",
    AiErrorCode.NOT_CONFIGURED: "AI description service is not fully configured. Please provide an API key.",
    AiErrorCode.INVALID_PROMPT: "A prompt is required to generate a description.",
    AiErrorCode.PROVIDER_ERROR: "The AI provider returned an error while generating the description.",
    AiErrorCode.EMPTY_RESPONSE: "The AI provider returned an empty response.",
    AiErrorCode.UNEXPECTED_ERROR: "An unexpected error occurred while generating the description.",
}


@dataclass(frozen=True)
class AiDescriptionResult:
    success: bool
    description: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[AiErrorCode] = None

    @classmethod
    def ok(cls, description: str) -> "AiDescriptionResult":
        return cls(success=True, description=description)

    @classmethod
    def failure(cls, code: AiErrorCode, message: Optional[str] = None) -> "AiDescriptionResult":
        return cls(success=False, error=message or ERROR_MESSAGES[code], error_code=code)


class AiDescriptionService:
    """Thin wrapper over an OpenAI-compatible chat completion endpoint."""

    def __init__(self, settings: Optional[Settings] = None, http: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.http = http or requests.Session()

    def generate(
        self,
        prompt: Optional[str],
        project_name: Optional[str] = None,
        duration_hours: Optional[Decimal] = None,
        additional_context: Optional[str] = None,
    ) -> AiDescriptionResult:
        """Send one completion request and return the first choice, trimmed."""
        if not self.settings.ai_enabled:
            return AiDescriptionResult.failure(AiErrorCode.DISABLED)

        if not self.settings.ai_api_key or not self.settings.ai_api_key.strip():
            return AiDescriptionResult.failure(AiErrorCode.NOT_CONFIGURED)

        if not prompt or not prompt.strip():
            return AiDescriptionResult.failure(AiErrorCode.INVALID_PROMPT)

        payload = self.build_payload(prompt, project_name, duration_hours, additional_context)

        try:
            response = self.http.post(
                self.build_url(),
                json=payload,
                headers=self.build_headers(),
                timeout=self.settings.ai_timeout_seconds,
            )
        except requests.Timeout:
            logger.warning(f"AI provider {self.settings.ai_provider} timed out after {self.settings.ai_timeout_seconds}s")
            return AiDescriptionResult.failure(AiErrorCode.PROVIDER_ERROR)
        except requests.RequestException as exc:
            logger.error(f"AI provider {self.settings.ai_provider} request failed: {exc}")
            return AiDescriptionResult.failure(AiErrorCode.UNEXPECTED_ERROR)

        if not response.ok:
            logger.warning(
                f"AI provider {self.settings.ai_provider} returned status {response.status_code}: {response.text[:500]}"
            )
            return AiDescriptionResult.failure(AiErrorCode.PROVIDER_ERROR)

        try:
            content = self._extract_content(response.json())
        except ValueError:
            logger.exception("AI provider returned a body that is not valid JSON")
            return AiDescriptionResult.failure(AiErrorCode.UNEXPECTED_ERROR)

        if not content:
            return AiDescriptionResult.failure(AiErrorCode.EMPTY_RESPONSE)

        return AiDescriptionResult.ok(content)

    def build_url(self) -> str:
        base_url = self.settings.ai_base_url
        if not base_url.endswith("/"):
            base_url += "/"
        url = urljoin(base_url, self.settings.ai_endpoint.lstrip("/"))
        if self.settings.ai_api_version:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}api-version={self.settings.ai_api_version}"
        return url

    def build_headers(self) -> Dict[str, str]:
        api_key = self.settings.ai_api_key.strip()
        if self.settings.ai_authentication_scheme.strip().lower() == "api-key":
            return {"api-key": api_key}
        return {"Authorization": f"{self.settings.ai_authentication_scheme.strip()} {api_key}"}

    def build_payload(
        self,
        prompt: str,
        project_name: Optional[str],
        duration_hours: Optional[Decimal],
        additional_context: Optional[str],
    ) -> Dict[str, Any]:
        return {
            "model": self.settings.ai_model,
            "temperature": self.settings.ai_temperature,
            "max_tokens": self.settings.ai_max_tokens,
            "messages": [
                {"role": "system", "content": self.settings.ai_effective_system_prompt},
                {"role": "user", "content": self.build_user_message(prompt, project_name, duration_hours, additional_context)},
            ],
        }

    @staticmethod
    def build_user_message(
        prompt: str,
        project_name: Optional[str] = None,
        duration_hours: Optional[Decimal] = None,
        additional_context: Optional[str] = None,
    ) -> str:
        lines = []
        if project_name and project_name.strip():
            lines.append(f"Project: {project_name.strip()}")
        if duration_hours is not None and duration_hours > 0:
            lines.append(f"Duration: approximately {float(duration_hours):.2f} hours.")
        if additional_context and additional_context.strip():
            lines.append(additional_context.strip())
        lines.append(prompt.strip())
        return "\n".join(lines)

    @staticmethod
    def _extract_content(body: Any) -> Optional[str]:
        try:
            content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        if not isinstance(content, str):
            return None
        return content.strip() or None
