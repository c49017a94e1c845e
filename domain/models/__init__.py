from .currency import ExchangeRate, FetchError, RequestContext
from .json_value import JsonArray, JsonKind, JsonNull, JsonNumber, JsonObject, JsonString, JsonValue

__all__ = [
    'ExchangeRate',
    'FetchError',
    'RequestContext',
    'JsonArray',
    'JsonKind',
    'JsonNull',
    'JsonNumber',
    'JsonObject',
    'JsonString',
    'JsonValue',
]
