from .adapter import XAIChatModel, XAIProvider, create_xai
