"""
Blacklist / whitelist storage for a single filter instance.

Both sets are lowercased on the way in. Exclusions win over terms at
classification time, so a word may sit in both sets.
"""

import logging
from typing import Iterable, List, Optional, Set, Union

from ..error_handler import InvalidInputError
from .wordlist import DEFAULT_PROFANITY

logger = logging.getLogger(__name__)

Words = Union[str, Iterable[str]]


def _as_word_list(words: Optional[Words], name: str = "words") -> List[str]:
    """Accept a single word or an iterable of words, return lowercase strings."""
    if words is None:
        return []
    if isinstance(words, str):
        words = [words]
    result = []
    for word in words:
        if not isinstance(word, str):
            raise InvalidInputError(
                f"Every entry in '{name}' must be text",
                f"{name} contains {type(word).__name__}: {word!r}"
            )
        result.append(word.lower())
    return result


class Lexicon:
    """
    The (terms, exclusions) pair that drives classification.

    Each Lexicon owns its own sets; building two filters from the same
    default list never shares mutable state.
    """

    def __init__(self, terms: Optional[Words] = None, exclusions: Optional[Words] = None):
        self._terms: Set[str] = set(_as_word_list(terms, "terms"))
        self._exclusions: Set[str] = set(_as_word_list(exclusions, "exclusions"))
        self.version = 0

    @classmethod
    def build(
        cls,
        empty_list: bool = False,
        words: Optional[Words] = None,
        add_words: Optional[Words] = None,
        exclude: Optional[Words] = None,
        default_words: Iterable[str] = DEFAULT_PROFANITY,
    ) -> "Lexicon":
        """
        Build a lexicon from filter options.

        Precedence: empty_list, then an explicit words list, then the
        default list plus add_words.
        """
        if empty_list:
            terms: List[str] = []
        elif words is not None:
            terms = _as_word_list(words, "words")
        else:
            terms = list(default_words) + _as_word_list(add_words, "add_words")

        lexicon = cls(terms, exclude)
        logger.debug(
            f"Lexicon built: {len(lexicon._terms)} terms, "
            f"{len(lexicon._exclusions)} exclusions"
        )
        return lexicon

    @property
    def terms(self) -> List[str]:
        """Blacklist terms in sorted order."""
        return sorted(self._terms)

    @property
    def exclusions(self) -> List[str]:
        """Whitelisted words in sorted order."""
        return sorted(self._exclusions)

    def contains(self, word: str) -> bool:
        return word in self._terms

    def is_excluded(self, word: str) -> bool:
        return word in self._exclusions

    def add(self, words: Words) -> None:
        """Add words to the blacklist, lifting any earlier whitelisting."""
        new_words = _as_word_list(words)
        self._terms.update(new_words)
        self._exclusions.difference_update(new_words)
        self.version += 1
        logger.debug(f"Added {len(new_words)} words to blacklist")

    def exclude(self, words: Words) -> None:
        """Whitelist words. The blacklist is left untouched."""
        new_words = _as_word_list(words)
        self._exclusions.update(new_words)
        self.version += 1
        logger.debug(f"Added {len(new_words)} words to whitelist")

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self):
        return iter(self.terms)

    def __repr__(self) -> str:
        return f"Lexicon(terms={len(self._terms)}, exclusions={len(self._exclusions)})"
