"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import os


# Converte string de ambiente (true/false, 1/0, yes/no) para bool
def _parse_bool(value: str) -> bool:
    value = value.strip().lower()
    if value in ('1', 'true', 'yes', 'on'):
        return True
    if value in ('0', 'false', 'no', 'off', ''):
        return False
    raise ValueError(f"Valor booleano inválido: {value}")


class Config:
    # Servidor
    HOST: str = os.getenv('HOST', '0.0.0.0')
    PORT: int = int(os.getenv('PORT', '7006'))
    SERVER_THREADS: int = int(os.getenv('SERVER_THREADS', '4'))

    # Logging
    LOG_LEVEL: int = int(os.getenv('LOG_LEVEL', '1'))
    LOG_FORMAT: str = os.getenv('LOG_FORMAT', 'console')  # 'json' ou 'console'

    # Magnet
    MAGNET_STRICT_TOPICS: bool = _parse_bool(os.getenv('MAGNET_STRICT_TOPICS', 'true'))  # False = namespaces URN desconhecidos viram UNKNOWN
    MAGNET_MAX_URI_LENGTH: int = int(os.getenv('MAGNET_MAX_URI_LENGTH', '8192'))  # Links maiores são recusados pela API (413)
    MAGNET_MAX_BATCH: int = int(os.getenv('MAGNET_MAX_BATCH', '100'))  # Máximo de links por requisição POST
