"""Accent-insensitive text matching shared by the domain and parsing layers."""
import unicodedata
from typing import Iterable


def fold(text: str) -> str:
    """Lower-case and drop combining accents (í -> i, ñ -> n)."""
    decomposed = unicodedata.normalize("NFKD", text.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def contains_any(folded: str, keywords: Iterable[str]) -> bool:
    return any(keyword in folded for keyword in keywords)
