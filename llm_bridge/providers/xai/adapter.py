import inspect
from typing import Any, Dict, Optional

from xai_sdk import AsyncClient
from xai_sdk.chat import system, user

from ..base import LanguageModel, ProviderAdapter, ProviderError
from ..errors import ErrorMapper
from ...core.normalization.usage import normalize_usage
from ...models.generation import GenerationParams, GenerationResponse
from ...observability.logging import ProviderLogger


logger = ProviderLogger("xai")


def build_chat_params(model_id: str, prompt: str, params: GenerationParams) -> Dict[str, Any]:
    """Assemble chat.create kwargs, leaving out unset options."""
    messages = []
    if params.system:
        messages.append(system(params.system))
    messages.append(user(prompt))

    xai_params: Dict[str, Any] = {"model": model_id, "messages": messages}
    if params.temperature is not None:
        xai_params["temperature"] = params.temperature
    if params.top_p is not None:
        xai_params["top_p"] = params.top_p
    if params.max_tokens is not None:
        xai_params["max_tokens"] = params.max_tokens
    if params.stop is not None:
        xai_params["stop"] = params.stop
    return xai_params


def _usage_to_dict(usage: Any) -> Optional[Dict[str, Any]]:
    if usage is None:
        return None
    if isinstance(usage, dict):
        return usage
    return {
        key: getattr(usage, key)
        for key in ("prompt_tokens", "completion_tokens", "total_tokens")
        if isinstance(getattr(usage, key, None), int)
    }


class XAIChatModel(LanguageModel):
    """xAI chat model handle, using xai_sdk.AsyncClient."""

    provider = "xai"

    def __init__(self, adapter: "XAIProvider", model_id: str):
        super().__init__(model_id)
        self.adapter = adapter

    async def generate(self, prompt: str, params: GenerationParams) -> GenerationResponse:
        """Generate text using the xAI chat API."""
        request_id = params.metadata.get('request_id') if params.metadata else None

        with logger.track_request("generate", self.model_id, request_id=request_id) as request_info:
            xai_params = build_chat_params(self.model_id, prompt, params)
            try:
                chat = self.adapter.client.chat.create(**xai_params)
                if inspect.isawaitable(chat):
                    chat = await chat
                response = await chat.sample()
            except Exception as e:
                error = ErrorMapper.map_error(e, self.provider)
                logger.log_error_classification(
                    ErrorMapper.get_error_classification(error), self.model_id, request_info['request_id']
                )
                raise error

            usage_dict = _usage_to_dict(getattr(response, 'usage', None))
            usage = normalize_usage(usage_dict, self.provider)
            if usage_dict:
                logger.log_usage(usage, self.model_id, request_info['request_id'])

            content = getattr(response, 'content', None)
            finish_reason = getattr(response, 'finish_reason', None)
            return GenerationResponse(
                text=content if isinstance(content, str) else None,
                model=self.model_id,
                usage=usage,
                provider=self.provider,
                finish_reason=finish_reason if isinstance(finish_reason, str) else None
            )


class XAIProvider(ProviderAdapter):
    """xAI API provider."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        super().__init__(api_key=api_key, base_url=base_url, name="xai")
        self._client: Optional[AsyncClient] = None

    @property
    def client(self) -> AsyncClient:
        """Lazy initialization of xAI client."""
        if self._client is None:
            if not self._api_key:
                raise ProviderError("xAI API key was not provided", provider="xai")
            self._client = AsyncClient(api_key=self._api_key)
        return self._client

    def chat_model(self, model_id: str) -> XAIChatModel:
        return XAIChatModel(self, model_id)


def create_xai(api_key: Optional[str] = None, base_url: Optional[str] = None) -> XAIProvider:
    return XAIProvider(api_key=api_key, base_url=base_url)
