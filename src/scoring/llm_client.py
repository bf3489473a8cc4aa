import logging
from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict
import litellm

from .models import Message, Role
from .prompts import SYSTEM_PROMPT
from ..errors import UpstreamError


logger = logging.getLogger(__name__)


def extract_content(response: Any) -> Optional[str]:
    """
    Pull the generated text out of a completion response.

    Accepts either a LiteLLM response object or its dict form. A response
    without choices is "no result" and yields None.
    """
    if response is None:
        return None
    if isinstance(response, dict):
        choices = response.get("choices") or []
        if not choices:
            return None
        message = choices[0].get("message") or {}
        return message.get("content")

    choices = getattr(response, "choices", None)
    if not choices:
        return None
    return choices[0].message.content


def to_payload(response: Any) -> Dict[str, Any]:
    """Convert a completion response into a JSON-serializable dict."""
    if isinstance(response, dict):
        return response
    return response.model_dump()


class LLMClient(BaseModel):
    """
    Client for single-shot chat completions via LiteLLM.

    Each request is a system message followed by one user prompt; no
    conversation history is kept between calls.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str = "gpt-4"
    temperature: float = 0.7
    max_tokens: Optional[int] = 300
    system_prompt: str = SYSTEM_PROMPT
    api_key: Optional[str] = None

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        # Pydantic stores extra fields in __pydantic_extra__
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    def build_messages(self, prompt: str) -> List[Dict[str, str]]:
        """
        Build the message list for one prompt.

        Args:
            prompt: The user prompt

        Returns:
            List of message dictionaries in OpenAI format
        """
        roles: List[tuple[Role, str]] = [("system", self.system_prompt), ("user", prompt)]
        return [Message(role=role, content=content).model_dump() for role, content in roles]

    async def completion(self, prompt: str, **kwargs: Any) -> Any:
        """
        Request a completion for a prompt.

        Args:
            prompt: The user prompt
            **kwargs: Additional arguments to pass to litellm.acompletion()

        Returns:
            The completion response from LiteLLM

        Raises:
            UpstreamError: If no API key is configured or the provider call fails
        """
        if not self.api_key:
            raise UpstreamError("Missing API key for the completion provider")

        params = {
            "model": self.model,
            "messages": self.build_messages(prompt),
            "temperature": self.temperature,
            "api_key": self.api_key,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        try:
            return await litellm.acompletion(**params)
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            body = getattr(e, "message", None) or str(e)
            logger.error("Completion API error (status=%s): %s", status_code, body)
            raise UpstreamError("Error calling completion API", status_code=status_code, body=body) from e

    async def complete_text(self, prompt: str, **kwargs: Any) -> Optional[str]:
        """
        Request a completion and return only its text.

        Returns:
            The generated text, or None if the response carried no choices
        """
        response = await self.completion(prompt, **kwargs)
        return extract_content(response)
