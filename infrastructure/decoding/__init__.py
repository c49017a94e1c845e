from .fields import extract_exchange_rate
from .json_parser import JsonParser, parse, parse_object_document

__all__ = ['JsonParser', 'extract_exchange_rate', 'parse', 'parse_object_document']
