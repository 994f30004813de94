"""Profanity detection subpackage."""

from .wordlist import (
    load_profanity_list,
    load_word_file,
    save_profanity_list,
    DEFAULT_PROFANITY,
    PROFANITY_STEMS
)
from .lexicon import Lexicon
from .detector import (
    ProfanityFilter,
    normalize_word,
    escape_term,
    build_term_pattern,
    FUZZY_MIN_TERM_LENGTH
)

__all__ = [
    'load_profanity_list',
    'load_word_file',
    'save_profanity_list',
    'DEFAULT_PROFANITY',
    'PROFANITY_STEMS',
    'Lexicon',
    'ProfanityFilter',
    'normalize_word',
    'escape_term',
    'build_term_pattern',
    'FUZZY_MIN_TERM_LENGTH'
]
