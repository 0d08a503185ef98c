"""
genpass.generator
Character pool construction and password sampling.

The random source is injectable: pass any ``random.Random`` instance as
``rng``. By default a ``SystemRandom`` is used, so output is suitable for
real passwords.
"""

import logging
import math
import random
import string
from typing import Dict, List, Optional, Sequence, TypeVar

T = TypeVar("T")

logger = logging.getLogger("genpass.generator")

DEFAULT_LENGTH = 12
DEFAULT_INCLUDE = "l,u,n,s"

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMERIC = string.digits
SYMBOLS = "~`!@#$%^&*()_-+={[}]|\\:;\"'<,>.?/"

# fixed append order when everything is selected
CATEGORIES: Dict[str, str] = {
    "lowercase": LOWERCASE,
    "uppercase": UPPERCASE,
    "numeric": NUMERIC,
    "symbol": SYMBOLS,
}

CATEGORY_CODES: Dict[str, str] = {
    "l": "lowercase",
    "u": "uppercase",
    "n": "numeric",
    "s": "symbol",
}

_sysrand = random.SystemRandom()


class GenpassError(Exception):
    """Base class for password generation errors."""


class InvalidLengthError(GenpassError, ValueError):
    pass


class EmptyPoolError(GenpassError, ValueError):
    def __init__(self, message: str = "no characters available to generate password"):
        super().__init__(message)


def parse_categories(includes: str) -> List[str]:
    """
    Map a selector string such as "l,n" to category names.
    Unknown codes are skipped; an empty string selects every category.
    """
    if not includes:
        return list(CATEGORIES)
    selected = []
    for code in includes:
        name = CATEGORY_CODES.get(code)
        if name is None:
            if code != ",":
                logger.debug("ignoring unknown category code %r", code)
            continue
        selected.append(name)
    return selected


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a shuffled copy of items. The argument is left untouched."""
    out = list(items)
    (rng or _sysrand).shuffle(out)
    return out


def build_pool(includes: str = DEFAULT_INCLUDE, rng: Optional[random.Random] = None) -> List[str]:
    """
    Build the shuffled list of characters eligible for sampling.

    Each selected category contributes its whole character set. A selector
    made only of unknown codes gives an empty pool; the sampler rejects it.
    """
    chars: List[str] = []
    for name in parse_categories(includes):
        chars.extend(CATEGORIES[name])
    return shuffle(chars, rng)


def sample(
    length: int,
    pool: Sequence[str],
    exclude: str = "",
    rng: Optional[random.Random] = None,
) -> str:
    """
    Draw ``length`` characters uniformly from ``pool`` minus ``exclude``.

    Raises InvalidLengthError for a negative length and EmptyPoolError when
    exclusion leaves nothing to draw from.
    """
    if length < 0:
        raise InvalidLengthError(f"length must be >= 0, got {length}")

    excluded = set(exclude)
    allowed = [c for c in pool if c not in excluded]
    if not allowed:
        raise EmptyPoolError()

    rng = rng or _sysrand
    return "".join(allowed[rng.randrange(len(allowed))] for _ in range(length))


def entropy_bits(length: int, pool_size: int) -> float:
    if pool_size <= 0:
        return 0.0
    return length * math.log2(pool_size)


def generate(
    length: int = DEFAULT_LENGTH,
    includes: str = DEFAULT_INCLUDE,
    exclude: str = "",
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a password of exactly ``length`` characters.
    """
    pool = build_pool(includes, rng)
    pool_size = len(set(pool) - set(exclude))
    logger.debug(
        "pool of %d characters (%d after exclusions), ~%.1f bits",
        len(pool),
        pool_size,
        entropy_bits(length, pool_size),
    )
    return sample(length, pool, exclude, rng)
