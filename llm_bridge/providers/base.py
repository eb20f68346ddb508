"""
Base Provider Adapter Interface

A provider adapter wraps one vendor SDK client. Calling the adapter with a
model name (or using ``chat_model``) returns a ``LanguageModel`` handle whose
``generate`` coroutine performs exactly one text-generation request.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.generation import GenerationParams, GenerationResponse


class LanguageModel(ABC):
    """A ready-to-use model handle bound to one provider and model name."""

    provider: str = ""

    def __init__(self, model_id: str):
        self.model_id = model_id

    @abstractmethod
    async def generate(self, prompt: str, params: GenerationParams) -> GenerationResponse:
        """
        Generate a completion for a single prompt.

        Args:
            prompt: The user prompt
            params: Generation options; unset fields must not be sent

        Returns:
            GenerationResponse with the generated text and normalized usage

        Raises:
            ProviderError: For provider-specific errors (transport, API errors)
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider={self.provider!r}, model_id={self.model_id!r})"


class ProviderAdapter(ABC):
    """
    Abstract base class for LLM provider adapters.

    The adapter is responsible for:
    - Holding credentials and constructing the SDK client lazily
    - Handing out model handles for model names
    """

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 name: Optional[str] = None):
        self._api_key = api_key
        self._base_url = base_url
        self._name = name

    @abstractmethod
    def chat_model(self, model_id: str) -> LanguageModel:
        """Return a chat-capable model handle for ``model_id``."""

    def __call__(self, model_id: str) -> LanguageModel:
        return self.chat_model(model_id)

    def is_available(self) -> bool:
        """Check if the provider has credentials configured."""
        return bool(self._api_key)

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    def get_provider_name(self) -> str:
        """
        Get the name of this provider.

        Uses the explicit name when one was given, otherwise the class name
        without the 'Provider' suffix.
        """
        if self._name:
            return self._name
        class_name = self.__class__.__name__
        if class_name.endswith("Provider"):
            return class_name[:-8].lower()
        return class_name.lower()


class ProviderError(Exception):
    """
    Base exception for provider-related errors.

    Attributes:
        provider: Provider name
        status_code: HTTP status code if applicable
        retry_after: Seconds the provider asked to wait, if any
        is_retryable: Whether the failure is transient (informational only)
        original_error: The original exception if wrapped
    """

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: Optional[int] = None,
        retry_after: Optional[float] = None
    ):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.retry_after = retry_after
        self.is_retryable = False
        self.original_error = None
