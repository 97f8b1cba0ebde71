"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Tuple, Union

from exceptions.magnet_exceptions import InvalidFieldError
from magnet.topic import Topic

EXTENSION_PREFIX = 'x.'

# Maior valor aceito em xl (inteiro sem sinal de 64 bits)
MAX_LENGTH = 2 ** 64 - 1

# Mesmo formato de um u64: '+' opcional e dígitos ASCII; int() aceitaria também '-', espaços e '_'
_LENGTH_REGEX = re.compile(r'\+?[0-9]+')


# Tipos de campo reconhecidos em um link magnet
class FieldKind(Enum):
    ACCEPTABLE_SOURCE = auto()
    DISPLAY_NAME = auto()
    EXTENSION = auto()
    EXACT_TOPIC = auto()
    KEYWORD_TOPIC = auto()
    LENGTH = auto()
    MANIFEST_TOPIC = auto()
    SOURCE = auto()
    TRACKER = auto()
    UNKNOWN = auto()


# Chaves cujo valor é guardado como string, sem validação
_PLAIN_KEYS = {
    'as': FieldKind.ACCEPTABLE_SOURCE,
    'dn': FieldKind.DISPLAY_NAME,
    'kt': FieldKind.KEYWORD_TOPIC,
    'mt': FieldKind.MANIFEST_TOPIC,
    'tr': FieldKind.TRACKER,
    'xs': FieldKind.SOURCE,
}


# Campo de um link magnet: tipo, valor já interpretado e a chave original
@dataclass(frozen=True)
class Field:
    kind: FieldKind
    value: Union[str, int, Topic]
    key: str

    @classmethod
    def new(cls, key: str, value: str, strict_topics: bool = True) -> 'Field':
        """
        Classifica um par (chave, valor) em um Field.

        Só xl e xt podem falhar; chaves desconhecidas viram FieldKind.UNKNOWN.

        Raises:
            InvalidFieldError: xl que não é inteiro de 64 bits sem sinal
            InvalidTopicError: xt fora da gramática URN
        """
        kind = _PLAIN_KEYS.get(key)
        if kind is not None:
            return cls(kind, value, key)

        if key == 'xl':
            return cls(FieldKind.LENGTH, _parse_length(key, value), key)

        if key == 'xt':
            return cls(FieldKind.EXACT_TOPIC, Topic.parse(value, strict=strict_topics), key)

        if key.startswith(EXTENSION_PREFIX):
            return cls(FieldKind.EXTENSION, value, key)

        return cls(FieldKind.UNKNOWN, value, key)

    @classmethod
    def from_pair(cls, pair: Tuple[str, str], strict_topics: bool = True) -> 'Field':
        key, value = pair
        return cls.new(key, value, strict_topics=strict_topics)

    def to_dict(self) -> Dict[str, Any]:
        """Converte o campo para dicionário (resposta JSON)"""
        value = self.value.to_dict() if isinstance(self.value, Topic) else self.value
        return {'kind': self.kind.name, 'key': self.key, 'value': value}


# Converte o valor de xl para int, rejeitando '-' e valores fora de 64 bits
def _parse_length(key: str, value: str) -> int:
    if not _LENGTH_REGEX.fullmatch(value):
        raise InvalidFieldError(key, value)
    # Zeros à esquerda são aceitos; o corte em 20 dígitos evita o limite de int() para strings longas
    digits = value.lstrip('+').lstrip('0') or '0'
    if len(digits) > 20:
        raise InvalidFieldError(key, value)
    length = int(digits)
    if length > MAX_LENGTH:
        raise InvalidFieldError(key, value)
    return length
