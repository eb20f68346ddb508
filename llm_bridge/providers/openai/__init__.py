from .adapter import (
    OpenAIChatModel,
    OpenAICompatibleProvider,
    OpenAIProvider,
    create_cohere,
    create_deepseek,
    create_google,
    create_groq,
    create_mistral,
    create_openai,
    create_openai_compatible,
)
