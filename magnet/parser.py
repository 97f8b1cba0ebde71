"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple
from urllib.parse import parse_qsl

from exceptions.magnet_exceptions import InvalidSchemeError, MagnetError, UrlEncodeError
from magnet.field import Field, FieldKind
from magnet.topic import Topic

logger = logging.getLogger(__name__)

MAGNET_PREFIX = 'magnet:?'


# Link magnet já interpretado: sequência ordenada e imutável de campos
class MagnetUri:
    __slots__ = ('_fields',)

    def __init__(self, fields: Iterable[Field] = ()):
        self._fields: Tuple[Field, ...] = tuple(fields)

    @classmethod
    def from_fields(cls, fields: Iterable[Field]) -> 'MagnetUri':
        return cls(fields)

    @classmethod
    def from_str(cls, uri: str, strict_topics: bool = True) -> 'MagnetUri':
        return parse(uri, strict_topics=strict_topics)

    @property
    def fields(self) -> Tuple[Field, ...]:
        return self._fields

    def fields_of(self, kind: FieldKind) -> List[Field]:
        return [f for f in self._fields if f.kind is kind]

    # Primeiro xt do link (None se não houver)
    def topic(self) -> Optional[Topic]:
        for field in self._fields:
            if field.kind is FieldKind.EXACT_TOPIC:
                return field.value
        return None

    def topics(self) -> List[Topic]:
        return [f.value for f in self.fields_of(FieldKind.EXACT_TOPIC)]

    def display_name(self) -> Optional[str]:
        names = self.fields_of(FieldKind.DISPLAY_NAME)
        return names[0].value if names else None

    def trackers(self) -> List[str]:
        return [f.value for f in self.fields_of(FieldKind.TRACKER)]

    def length(self) -> Optional[int]:
        lengths = self.fields_of(FieldKind.LENGTH)
        return lengths[0].value if lengths else None

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário (usado na resposta da API)"""
        topic = self.topic()
        return {
            'fields': [f.to_dict() for f in self._fields],
            'topic': topic.to_dict() if topic else None,
            'count': len(self._fields)
        }

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MagnetUri):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(self._fields)

    def __repr__(self) -> str:
        return f"MagnetUri({list(self._fields)!r})"


# Remove o prefixo magnet:? e retorna a query string
def strip_scheme(uri: str) -> str:
    if not uri.startswith(MAGNET_PREFIX):
        raise InvalidSchemeError(uri)
    return uri[len(MAGNET_PREFIX):]


# Decodifica a query string em pares (chave, valor), mantendo a ordem e as chaves repetidas
def decode_query(query: str, uri: Optional[str] = None) -> List[Tuple[str, str]]:
    try:
        return parse_qsl(query, keep_blank_values=True, errors='strict')
    except ValueError as e:
        raise UrlEncodeError(uri if uri is not None else query, str(e)) from e


# Parse de URI magnet - retorna MagnetUri ou levanta MagnetError
def parse(uri: str, strict_topics: bool = True) -> MagnetUri:
    try:
        query = strip_scheme(uri)
        pairs = decode_query(query, uri)
        fields = [Field.from_pair(pair, strict_topics=strict_topics) for pair in pairs]
    except MagnetError as e:
        logger.debug(f"Falha ao interpretar link magnet: {type(e).__name__}: {e}")
        raise
    return MagnetUri.from_fields(fields)
