"""Utility modules for the browse client."""

from .query_encoder import (
    EncodingError,
    QueryPair,
    Range,
    concat,
    encode_optional,
    encode_pagination,
    encode_range,
    encode_seeds,
    to_query_string,
    to_query_value
)

__all__ = [
    'EncodingError',
    'QueryPair',
    'Range',
    'concat',
    'encode_optional',
    'encode_pagination',
    'encode_range',
    'encode_seeds',
    'to_query_string',
    'to_query_value'
]
