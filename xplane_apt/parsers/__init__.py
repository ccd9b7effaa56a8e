from .rows import Row, split_rows
from .path_parser import PathParser, signed_area, is_clockwise
from .airport_parser import AirportParser, parse_airport, split_linear_features
from .sign_text import (
    parse_sign_text,
    decode_airport_signs,
    generate_sign_cache_key,
    decode_sign_cache_key,
)

__all__ = [
    'Row',
    'split_rows',
    'PathParser',
    'signed_area',
    'is_clockwise',
    'AirportParser',
    'parse_airport',
    'split_linear_features',
    'parse_sign_text',
    'decode_airport_signs',
    'generate_sign_cache_key',
    'decode_sign_cache_key',
]
