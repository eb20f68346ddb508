from typing import Optional

from anthropic import AsyncAnthropic

from ..base import LanguageModel, ProviderAdapter, ProviderError
from ..errors import ErrorMapper
from ...core.normalization.usage import normalize_usage
from ...models.generation import GenerationParams, GenerationResponse
from ...observability.logging import ProviderLogger
from .parsers import extract_text_from_messages_response
from .payloads import assemble_messages_params


logger = ProviderLogger("anthropic")


class AnthropicChatModel(LanguageModel):
    """Anthropic Messages API model handle."""

    provider = "anthropic"

    def __init__(self, adapter: "AnthropicProvider", model_id: str):
        super().__init__(model_id)
        self.adapter = adapter

    async def generate(self, prompt: str, params: GenerationParams) -> GenerationResponse:
        """Generate text using the Anthropic Messages API."""
        request_id = params.metadata.get('request_id') if params.metadata else None

        with logger.track_request("generate", self.model_id, request_id=request_id) as request_info:
            anthropic_params = assemble_messages_params(self.model_id, prompt, params)
            try:
                response = await self.adapter.client.messages.create(**anthropic_params)
            except Exception as e:
                error = ErrorMapper.map_error(e, self.provider)
                logger.log_error_classification(
                    ErrorMapper.get_error_classification(error), self.model_id, request_info['request_id']
                )
                raise error

            usage_dict = None
            if getattr(response, 'usage', None) is not None:
                try:
                    usage_dict = response.usage.model_dump()
                except Exception:
                    usage_dict = {}
            usage = normalize_usage(usage_dict, self.provider)
            if usage_dict:
                logger.log_usage(usage, self.model_id, request_info['request_id'])

            return GenerationResponse(
                text=extract_text_from_messages_response(response),
                model=self.model_id,
                usage=usage,
                provider=self.provider,
                finish_reason=getattr(response, 'stop_reason', None)
            )


class AnthropicProvider(ProviderAdapter):
    """Anthropic Claude API provider."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        super().__init__(api_key=api_key, base_url=base_url, name="anthropic")
        self._client: Optional[AsyncAnthropic] = None

    @property
    def client(self) -> AsyncAnthropic:
        """Lazy initialization of Anthropic client."""
        if self._client is None:
            if not self._api_key:
                raise ProviderError("Anthropic API key was not provided", provider="anthropic")
            kwargs = {"api_key": self._api_key, "max_retries": 0}
            if self._base_url:
                kwargs["base_url"] = self._base_url
            self._client = AsyncAnthropic(**kwargs)
        return self._client

    def chat_model(self, model_id: str) -> AnthropicChatModel:
        return AnthropicChatModel(self, model_id)


def create_anthropic(api_key: Optional[str] = None, base_url: Optional[str] = None) -> AnthropicProvider:
    return AnthropicProvider(api_key=api_key, base_url=base_url)
