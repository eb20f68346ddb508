from .json_extract import JsonExtraction, extract_json, interpret_response
from .params import (
    normalize_request,
    parse_expect_json,
    parse_number,
    parse_stop_sequences,
    select_model,
    split_model_identifier,
)

__all__ = [
    "JsonExtraction",
    "extract_json",
    "interpret_response",
    "normalize_request",
    "parse_expect_json",
    "parse_number",
    "parse_stop_sequences",
    "select_model",
    "split_model_identifier",
]
