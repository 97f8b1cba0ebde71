"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import Optional


# Exceção base para erros de magnet
class MagnetError(Exception):
    pass


# Link magnet inválido
class InvalidMagnetLinkError(MagnetError):
    def __init__(self, magnet_link: str, reason: str = ""):
        self.magnet_link = magnet_link
        self.reason = reason
        message = f"Link magnet inválido: {magnet_link}"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


# Link sem o prefixo magnet:?
class InvalidSchemeError(InvalidMagnetLinkError):
    def __init__(self, magnet_link: str):
        super().__init__(magnet_link, "esquema deve começar com 'magnet:?'")


# Falha ao decodificar a query string (diagnóstico vem do decodificador)
class UrlEncodeError(InvalidMagnetLinkError):
    def __init__(self, magnet_link: str, diagnostic: str):
        self.diagnostic = diagnostic
        super().__init__(magnet_link, f"erro de decodificação: {diagnostic}")


# Campo com valor estruturado inválido (ex: xl não numérico)
class InvalidFieldError(MagnetError):
    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"Campo inválido: {key}={value}")


# Tópico (xt) fora da gramática urn:<namespace>:<valor>
class InvalidTopicError(MagnetError):
    def __init__(self, diagnostic: str, topic: Optional[str] = None):
        # diagnostic é o namespace desconhecido ou o valor completo, conforme a regra que falhou
        self.diagnostic = diagnostic
        self.topic = topic if topic is not None else diagnostic
        super().__init__(f"Tópico inválido: {diagnostic}")
