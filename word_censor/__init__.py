"""
Word Censor
===========

Lexical profanity classifier and redactor. Checks text against a
blacklist of offensive terms (with a whitelist of exceptions) and
produces redacted copies.

All matching is purely lexical and runs in memory.
"""

__version__ = "0.1.0"
__author__ = "Word Censor"

# Export key classes for convenience
from .config import Config, FilterConfig
from .error_handler import UserFriendlyError, InvalidInputError
from .profanity import ProfanityFilter, Lexicon, DEFAULT_PROFANITY
