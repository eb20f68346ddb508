"""Fake providers and model handles for pipeline tests."""

import asyncio
from typing import Any, Dict, List, Optional

from llm_bridge.models.generation import GenerationParams, GenerationResponse
from llm_bridge.providers.base import LanguageModel, ProviderAdapter


class FakeModel(LanguageModel):
    """Model handle returning a canned response and recording its calls."""

    def __init__(self, model_id: str, text: Optional[str] = "Test response",
                 delay: float = 0.0, error: Optional[Exception] = None, provider: str = "fake"):
        super().__init__(model_id)
        self.provider = provider
        self.text = text
        self.delay = delay
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.cancelled = False

    async def generate(self, prompt: str, params: GenerationParams) -> GenerationResponse:
        self.calls.append({"prompt": prompt, "params": params})
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error
        return GenerationResponse(text=self.text, model=self.model_id, provider=self.provider)


class FakeProvider(ProviderAdapter):
    """Provider adapter handing out FakeModel instances."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 name: Optional[str] = None, **model_kwargs):
        super().__init__(api_key=api_key, base_url=base_url, name=name)
        self.model_kwargs = model_kwargs
        self.models: List[FakeModel] = []

    def chat_model(self, model_id: str) -> FakeModel:
        model = FakeModel(model_id, provider=self.get_provider_name(), **self.model_kwargs)
        self.models.append(model)
        return model


class FakeFactory:
    """Provider factory that records the options it was built with."""

    def __init__(self, **model_kwargs):
        self.model_kwargs = model_kwargs
        self.instances: List[FakeProvider] = []
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, **opts) -> FakeProvider:
        self.calls.append(opts)
        instance = FakeProvider(**opts, **self.model_kwargs)
        self.instances.append(instance)
        return instance

    @property
    def last_model(self) -> FakeModel:
        return self.instances[-1].models[-1]
