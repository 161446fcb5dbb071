"""Banglish to Bengali transliteration with the khipro phonetic scheme"""

from .converter import PreviewSequence, convert, preview_sequence
from .tables import RuleTableError

__all__ = ["convert", "preview_sequence", "PreviewSequence", "RuleTableError"]
