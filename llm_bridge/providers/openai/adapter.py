from typing import Optional

from openai import AsyncOpenAI

from ..base import LanguageModel, ProviderAdapter
from ..errors import ErrorMapper
from ...config.providers import OPENAI_COMPATIBLE_BASE_URLS
from ...core.normalization.usage import normalize_usage
from ...models.generation import GenerationParams, GenerationResponse
from ...observability.logging import ProviderLogger
from .parsers import extract_finish_reason, extract_text_from_chat_completion
from .payloads import build_chat_payload


class OpenAIChatModel(LanguageModel):
    """Chat Completions model handle."""

    def __init__(self, adapter: "OpenAIProvider", model_id: str):
        super().__init__(model_id)
        self.adapter = adapter
        self.provider = adapter.get_provider_name()
        self.logger = ProviderLogger(self.provider)

    async def generate(self, prompt: str, params: GenerationParams) -> GenerationResponse:
        """Generate text using the Chat Completions API."""
        request_id = params.metadata.get('request_id') if params.metadata else None

        with self.logger.track_request("generate", self.model_id, request_id=request_id) as request_info:
            payload = build_chat_payload(
                self.model_id, prompt, params, max_tokens_field=self.adapter.max_tokens_field
            )
            try:
                response = await self.adapter.client.chat.completions.create(**payload)
            except Exception as e:
                error = ErrorMapper.map_error(e, self.provider)
                self.logger.log_error_classification(
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
                self.logger.log_usage(usage, self.model_id, request_info['request_id'])

            return GenerationResponse(
                text=extract_text_from_chat_completion(response),
                model=self.model_id,
                usage=usage,
                provider=self.provider,
                finish_reason=extract_finish_reason(response)
            )


class OpenAIProvider(ProviderAdapter):
    """OpenAI API provider."""

    max_tokens_field = "max_completion_tokens"

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 name: Optional[str] = None):
        super().__init__(api_key=api_key, base_url=base_url, name=name or "openai")
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy initialization of the OpenAI client."""
        if self._client is None:
            # An empty key sends no Authorization header (keyless local servers).
            self._client = AsyncOpenAI(
                api_key=self._api_key or "",
                base_url=self._base_url or None,
                max_retries=0,
            )
        return self._client

    def chat_model(self, model_id: str) -> OpenAIChatModel:
        return OpenAIChatModel(self, model_id)


class OpenAICompatibleProvider(OpenAIProvider):
    """Any server that speaks the OpenAI chat completions schema."""

    max_tokens_field = "max_tokens"

    def __init__(self, name: str, base_url: str, api_key: Optional[str] = None):
        if not base_url:
            raise ValueError(f"base_url is required for OpenAI-compatible provider '{name}'")
        super().__init__(api_key=api_key, base_url=base_url, name=name)

    def is_available(self) -> bool:
        return bool(self._base_url)


def create_openai(api_key: Optional[str] = None, base_url: Optional[str] = None) -> OpenAIProvider:
    return OpenAIProvider(api_key=api_key, base_url=base_url)


def create_openai_compatible(name: str, base_url: Optional[str] = None,
                             api_key: Optional[str] = None) -> OpenAICompatibleProvider:
    return OpenAICompatibleProvider(name=name, base_url=base_url, api_key=api_key)


def _hosted_vendor(name: str):
    default_base_url = OPENAI_COMPATIBLE_BASE_URLS[name]

    def factory(api_key: Optional[str] = None, base_url: Optional[str] = None) -> OpenAICompatibleProvider:
        return OpenAICompatibleProvider(name=name, base_url=base_url or default_base_url, api_key=api_key)

    factory.__name__ = f"create_{name}"
    factory.__doc__ = f"{name} through its OpenAI-compatible endpoint ({default_base_url})."
    return factory


create_cohere = _hosted_vendor("cohere")
create_deepseek = _hosted_vendor("deepseek")
create_google = _hosted_vendor("google")
create_groq = _hosted_vendor("groq")
create_mistral = _hosted_vendor("mistral")
