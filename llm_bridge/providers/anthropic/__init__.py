from .adapter import AnthropicChatModel, AnthropicProvider, create_anthropic
