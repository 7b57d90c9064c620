"""
core: 框架核心

統一匯出例外體系，方便外部 import。

用法：
    from core import ConverterError, MalformedInputError
"""

from core.exceptions import (
    ConfigError,
    ConversionInputError,
    ConverterError,
    InvalidConfigError,
    MalformedInputError,
    MissingOrEmptyInputError,
    UnsupportedFileKindError,
)

__all__ = [
    "ConfigError",
    "ConversionInputError",
    "ConverterError",
    "InvalidConfigError",
    "MalformedInputError",
    "MissingOrEmptyInputError",
    "UnsupportedFileKindError",
]
