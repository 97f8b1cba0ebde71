"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from exceptions.magnet_exceptions import InvalidTopicError

logger = logging.getLogger(__name__)

URN_PREFIX = 'urn:'


# Namespaces URN reconhecidos dentro de xt
class TopicKind(Enum):
    AICH = 'aich'
    BITPRINT = 'bitprint'
    BITTORRENT = 'btih'
    ED2K = 'ed2k'
    KAZAA = 'kzhash'
    MD5 = 'md5'
    SHA1 = 'sha1'
    TTHASH = 'tree:tiger'
    UNKNOWN = 'unknown'


# Namespaces de dois segmentos (urn:<namespace>:<hash>)
_SIMPLE_NAMESPACES = {
    'aich': TopicKind.AICH,
    'bitprint': TopicKind.BITPRINT,
    'btih': TopicKind.BITTORRENT,
    'ed2k': TopicKind.ED2K,
    'kzhash': TopicKind.KAZAA,
    'md5': TopicKind.MD5,
    'sha1': TopicKind.SHA1,
}


# Tópico exato de um link magnet (identidade do conteúdo)
@dataclass(frozen=True)
class Topic:
    kind: TopicKind
    value: str

    @classmethod
    def parse(cls, value: str, strict: bool = True) -> 'Topic':
        """
        Faz o parse de uma URN (lado direito de xt=) para um Topic.

        Args:
            value: String no formato urn:<namespace>:<hash> ou urn:tree:tiger:<hash>
            strict: Se False, namespaces desconhecidos viram TopicKind.UNKNOWN
                    em vez de erro

        Returns:
            Topic correspondente ao namespace

        Raises:
            InvalidTopicError: Se o valor não segue a gramática URN
        """
        if not value.startswith(URN_PREFIX):
            raise InvalidTopicError(value)

        args = value[len(URN_PREFIX):].split(':')

        if len(args) == 2:
            namespace, hash_value = args
            kind = _SIMPLE_NAMESPACES.get(namespace)
            if kind is not None:
                return cls(kind, hash_value)
            if not strict:
                logger.debug(f"Namespace desconhecido aceito em modo leniente: {namespace}")
                return cls(TopicKind.UNKNOWN, value)
            # Só o namespace vai no diagnóstico; o valor completo fica em .topic
            raise InvalidTopicError(namespace, topic=value)

        if len(args) == 3:
            first, second, hash_value = args
            if first == 'tree' and second == 'tiger':
                return cls(TopicKind.TTHASH, hash_value)

        raise InvalidTopicError(value)

    @property
    def namespace(self) -> str:
        return self.kind.value

    def to_dict(self) -> Dict[str, Any]:
        """Converte o tópico para dicionário (resposta JSON)"""
        return {'kind': self.kind.name, 'namespace': self.namespace, 'value': self.value}

    def __str__(self) -> str:
        if self.kind is TopicKind.UNKNOWN:
            return self.value
        return f"{URN_PREFIX}{self.namespace}:{self.value}"
