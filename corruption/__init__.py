from .base import (
    BaseCorruptor,
    CorruptionResult,
    CorruptionSettings,
    ErrorCounts,
    WordEvent,
    CATEGORIES,
    SPELLING,
    PUNCTUATION,
    MISSING_TEXT,
)
from .character import SpellingCorruptor
from .punctuation import PunctuationCorruptor
from .word import MissingTextCorruptor
from .sentence import SentenceRemover
from .tokenizer import Segment, tokenize
from .engine import TextCorruptor, corrupt_text

__all__ = [
    "BaseCorruptor",
    "CorruptionResult",
    "CorruptionSettings",
    "ErrorCounts",
    "WordEvent",
    "CATEGORIES",
    "SPELLING",
    "PUNCTUATION",
    "MISSING_TEXT",
    "SpellingCorruptor",
    "PunctuationCorruptor",
    "MissingTextCorruptor",
    "SentenceRemover",
    "Segment",
    "tokenize",
    "TextCorruptor",
    "corrupt_text",
]
