"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from exceptions.magnet_exceptions import (
    MagnetError,
    InvalidMagnetLinkError,
    InvalidSchemeError,
    UrlEncodeError,
    InvalidFieldError,
    InvalidTopicError
)

__all__ = [
    'MagnetError',
    'InvalidMagnetLinkError',
    'InvalidSchemeError',
    'UrlEncodeError',
    'InvalidFieldError',
    'InvalidTopicError',
]
