"""genpass: command-line random password generator."""

from .generator import (
    CATEGORIES,
    DEFAULT_INCLUDE,
    DEFAULT_LENGTH,
    EmptyPoolError,
    GenpassError,
    InvalidLengthError,
    build_pool,
    generate,
    sample,
    shuffle,
)

__version__ = "0.1.0"

__all__ = [
    "CATEGORIES",
    "DEFAULT_INCLUDE",
    "DEFAULT_LENGTH",
    "EmptyPoolError",
    "GenpassError",
    "InvalidLengthError",
    "build_pool",
    "generate",
    "sample",
    "shuffle",
]
