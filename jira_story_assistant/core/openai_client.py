import logging
from typing import Any, Dict, List, Optional

from openai import AzureOpenAI, APIConnectionError, APIStatusError, APIError

from ..config.settings import OPENAI_SETTINGS
from ..utils.exceptions import ConfigurationError, ModelResponseError, OpenAIError

logger = logging.getLogger(__name__)

class OpenAIClient:
    def __init__(self, api_key: str, settings: Optional[Dict[str, Any]] = None):
        self.api_key = api_key
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("Azure API Key is required.")
        self.settings = settings or OPENAI_SETTINGS
        # The key travels in the "api-key" header; retries are left to the user
        self.client = AzureOpenAI(
            api_key=self.api_key,
            azure_endpoint=self.settings["endpoint"].rstrip("/"),
            api_version=self.settings["api_version"],
            max_retries=0,
            timeout=self.settings.get("timeout", 60),
        )
        self.deployment = self.settings["deployment"]

    def chat(self, messages: List[Dict[str, str]], max_tokens: int,
             temperature: Optional[float] = None, seed: Optional[int] = None) -> str:
        """Send one chat completion request and return the reply text.

        Raises OpenAIError for non-success statuses and transport failures,
        and ModelResponseError when the reply carries no content.
        """
        params: Dict[str, Any] = {
            "model": self.deployment,
            "messages": messages,
            "max_tokens": max_tokens,
        }
        if temperature is not None:
            params["temperature"] = temperature
        if seed is not None:
            params["seed"] = seed

        try:
            logger.debug(f"Azure OpenAI request to {self.deployment} ({len(messages)} messages)")
            response = self.client.chat.completions.create(**params)
        except APIStatusError as e:
            logger.error(f"Azure OpenAI API Error {e.status_code}: {e}")
            raise OpenAIError("API error", status_code=e.status_code) from e
        except APIConnectionError as e:
            logger.error(f"Azure OpenAI connection error: {e}")
            raise OpenAIError("Network error") from e
        except APIError as e:
            logger.error(f"Azure OpenAI API Error: {e}")
            raise OpenAIError(str(e)) from e

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices and choices[0].message else None
        if not content:
            raise ModelResponseError("No valid response from Azure OpenAI.")
        return content
