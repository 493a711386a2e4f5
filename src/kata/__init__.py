"""Small standalone routines: RNA translation, minesweeper hints, Diffie-Hellman,
Roman numerals and bracket matching. None of them touch the zebra solver."""

from .brackets import is_balanced
from .diffie_hellman import private_key, public_key, secret
from .minesweeper import annotate
from .rna import translate
from .roman import from_roman, to_roman

__all__ = [
    "is_balanced",
    "private_key",
    "public_key",
    "secret",
    "annotate",
    "translate",
    "from_roman",
    "to_roman",
]
