from .executor import build_generation_params, execute_request

__all__ = ["build_generation_params", "execute_request"]
