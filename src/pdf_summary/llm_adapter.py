from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

import requests

from pdf_summary.config import DEFAULT_API_URL, Settings
from pdf_summary.errors import CompletionRequestError, ConfigurationError
from pdf_summary.log import get_logger

logger = get_logger(__name__)

Message = Dict[str, str]


@dataclass(frozen=True)
class Choice:
    """One completion choice returned by the chat API."""

    index: int
    role: str
    content: str


class CompletionClient(ABC):
    """
    Abstract interface for chat completion services.
    Implementations must be stateless: each call is one independent request.

    Warning: Document text is sent to the remote service as-is.
    """

    @abstractmethod
    def complete(self, messages: List[Message], model: str, temperature: float) -> List[Choice]:
        """
        Sends role-tagged messages and returns the completion choices.

        Args:
            messages (List[Message]): Ordered messages, each {"role": ..., "content": ...}.
            model (str): Target model identifier.
            temperature (float): Sampling temperature.

        Returns:
            List[Choice]: Choices in the order returned by the service (possibly empty).

        Raises:
            CompletionRequestError: If the request fails for any reason.
        """
        pass


class OpenAIChatAdapter(CompletionClient):
    """
    Adapter for OpenAI-compatible chat completion REST APIs.

    Requests are sent once; failures are not retried.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        http_proxy: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        if not api_key:
            raise ConfigurationError("OpenAI API key is missing")
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.proxies = None
        if http_proxy:
            logger.debug("using http proxy for completion requests")
            self.proxies = {"http": http_proxy, "https": http_proxy}

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAIChatAdapter":
        return cls(
            api_key=settings.api_key,
            api_url=settings.api_url,
            http_proxy=settings.http_proxy,
            timeout=settings.request_timeout,
        )

    def complete(self, messages: List[Message], model: str, temperature: float) -> List[Choice]:
        headers = {"Content-Type": "application/json", "Authorization": f"Bearer {self.api_key}"}
        payload = {
            "model": model,
            "temperature": temperature,
            "messages": messages,
        }

        try:
            response = requests.post(
                self.api_url, json=payload, headers=headers, proxies=self.proxies, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as err:
            raise CompletionRequestError(f"openai chat failed: {err}") from err

        try:
            data = response.json()
        except ValueError as err:
            raise CompletionRequestError("openai chat failed: response is not valid JSON") from err

        return _parse_choices(data)


def _parse_choices(data) -> List[Choice]:
    """Converts an OpenAI-style response body into Choice objects."""
    if not isinstance(data, dict) or not isinstance(data.get("choices"), list):
        raise CompletionRequestError("openai chat failed: response has no 'choices' list")

    choices = []
    try:
        for position, item in enumerate(data["choices"]):
            message = item["message"]
            choices.append(
                Choice(
                    index=item.get("index", position),
                    role=message.get("role", "assistant"),
                    content=message.get("content") or "",
                )
            )
    except (KeyError, TypeError, AttributeError) as err:
        raise CompletionRequestError(f"openai chat failed: malformed choice: {err}") from err
    return choices
