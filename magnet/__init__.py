"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from .field import Field, FieldKind
from .topic import Topic, TopicKind
from .parser import MagnetUri, parse, strip_scheme, decode_query

__all__ = [
    "Field",
    "FieldKind",
    "Topic",
    "TopicKind",
    "MagnetUri",
    "parse",
    "strip_scheme",
    "decode_query",
]
