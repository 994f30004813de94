"""
Profanity classification and redaction over a Lexicon.

Matching works on normalized tokens:
- Exact lookup against the blacklist set
- Substring ("looks profane") lookup for longer blacklist terms, so
  compounds like "bigshitheads" are still caught
- Whitelist check first; an excluded word is never profane

The substring step is a best-effort heuristic. Short terms are left out
of it because they occur inside too many innocent words.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..config import (
    Config,
    FilterConfig,
    DEFAULT_NORMALIZE_REGEX,
    DEFAULT_PLACEHOLDER,
    DEFAULT_REDACT_REGEX,
)
from ..error_handler import require_text
from .lexicon import Lexicon, Words
from .wordlist import DEFAULT_PROFANITY, load_profanity_list, load_word_file

logger = logging.getLogger(__name__)


# Escaped terms at least this long take part in substring matching
FUZZY_MIN_TERM_LENGTH = 4

_NON_WORD_CHAR = re.compile(r"(\W)")
_WORD_BOUNDARY = re.compile(r"\b")
_DEFAULT_NORMALIZE_PATTERN = re.compile(DEFAULT_NORMALIZE_REGEX)


def normalize_word(word: str, pattern: re.Pattern = _DEFAULT_NORMALIZE_PATTERN) -> str:
    """
    Normalize a token for matching.

    - Converts to lowercase
    - Removes every character matched by `pattern` (by default anything
      that is not a letter, digit, |, $ or @)
    """
    return pattern.sub('', require_text(word, "word").lower())


def escape_term(term: str) -> str:
    """
    Backslash-escape every non-word character so a term is matched literally.

    Examples:
        a$$hole -> a\\$\\$hole
        f.u.c.k -> f\\.u\\.c\\.k
    """
    return _NON_WORD_CHAR.sub(r"\\\1", term)


def build_term_pattern(term: str) -> re.Pattern:
    """Compile a case-insensitive literal substring pattern for a term."""
    return re.compile(escape_term(term), re.IGNORECASE)


class ProfanityFilter:
    """
    Classifies and redacts profane words.

    Args:
        empty_list: Start with no blacklist at all
        words: Use this blacklist instead of the default one
        add_words: Extra words merged into the default blacklist
        exclude: Whitelisted words, never treated as profane
        placeholder: Single character replacing each redacted character
        normalize_regex: Characters stripped from tokens before matching
        redact_regex: Characters replaced by the placeholder
        filter_config: Prebuilt FilterConfig; overrides the three options above
        default_words: Default blacklist used when `words` is not given
    """

    def __init__(
        self,
        empty_list: bool = False,
        words: Optional[Words] = None,
        add_words: Optional[Words] = None,
        exclude: Optional[Words] = None,
        placeholder: Optional[str] = None,
        normalize_regex: Union[str, re.Pattern, None] = None,
        redact_regex: Union[str, re.Pattern, None] = None,
        filter_config: Optional[FilterConfig] = None,
        default_words: Iterable[str] = DEFAULT_PROFANITY,
    ):
        if filter_config is None:
            filter_config = FilterConfig(
                placeholder=DEFAULT_PLACEHOLDER if placeholder is None else placeholder,
                normalize_regex=DEFAULT_NORMALIZE_REGEX if normalize_regex is None else normalize_regex,
                redact_regex=DEFAULT_REDACT_REGEX if redact_regex is None else redact_regex,
            )
        self.config = filter_config
        self.lexicon = Lexicon.build(
            empty_list=empty_list,
            words=words,
            add_words=add_words,
            exclude=exclude,
            default_words=default_words,
        )
        self._fuzzy_patterns: Optional[List[Tuple[str, re.Pattern]]] = None
        self._patterns_version = -1

    @classmethod
    def from_config(cls, config: Config) -> "ProfanityFilter":
        """Build a filter from a loaded Config, reading any list files it names."""
        lists = config.lists

        default_words = load_profanity_list(lists.custom_wordlist_path)

        exclude = list(lists.exclude or [])
        if lists.exclude_path:
            if Path(lists.exclude_path).exists():
                exclude.extend(load_word_file(lists.exclude_path))
            else:
                logger.warning(f"Exclude list not found: {lists.exclude_path}, ignoring")

        return cls(
            empty_list=lists.empty_list,
            words=lists.words,
            add_words=lists.add_words,
            exclude=exclude,
            filter_config=config.filter,
            default_words=default_words,
        )

    @property
    def placeholder(self) -> str:
        return self.config.placeholder

    @property
    def words(self) -> List[str]:
        """Current blacklist, sorted."""
        return self.lexicon.terms

    @property
    def exclusions(self) -> List[str]:
        """Current whitelist, sorted."""
        return self.lexicon.exclusions

    def normalize(self, token: str) -> str:
        return normalize_word(token, self.config.normalize_pattern)

    def _substring_patterns(self) -> List[Tuple[str, re.Pattern]]:
        """Compiled substring patterns, rebuilt only after the lexicon changes."""
        if self._fuzzy_patterns is None or self._patterns_version != self.lexicon.version:
            patterns = []
            for term in self.lexicon.terms:
                if len(escape_term(term)) >= FUZZY_MIN_TERM_LENGTH:
                    patterns.append((term, build_term_pattern(term)))
            self._fuzzy_patterns = patterns
            self._patterns_version = self.lexicon.version
            logger.debug(f"Compiled {len(patterns)} substring patterns")
        return self._fuzzy_patterns

    def match_word(self, token: str) -> Optional[Tuple[str, str]]:
        """
        Check a single token against the lexicon.

        Returns:
            Tuple of (matched_term, match_type) where match_type is
            "exact" or "contains", or None if the token is clean or
            whitelisted
        """
        word = self.normalize(token)
        if not word:
            return None

        if self.lexicon.is_excluded(word) or self.lexicon.is_excluded(token.lower()):
            return None

        if self.lexicon.contains(word):
            logger.debug(f"Detected profanity: '{token}' -> '{word}' (exact)")
            return (word, "exact")

        for term, pattern in self._substring_patterns():
            if pattern.search(word):
                logger.debug(f"Detected profanity: '{token}' -> '{term}' (contains)")
                return (term, "contains")

        return None

    def is_profane_word(self, token: str) -> bool:
        """Determine if a single word is profane or looks profane."""
        return self.match_word(token) is not None

    def is_profane(self, text: str) -> Union[str, bool]:
        """
        Find the first profane word in a sentence.

        The sentence is split on single spaces. Returns the first profane
        token (normalized), or False when there is none. Use
        find_profane_words() to get every match.
        """
        for raw in require_text(text).split(' '):
            if self.is_profane_word(raw):
                return self.normalize(raw)
        return False

    def find_profane_words(self, text: str) -> List[str]:
        """All profane tokens in a sentence, normalized, in order."""
        return [
            self.normalize(raw)
            for raw in require_text(text).split(' ')
            if self.is_profane_word(raw)
        ]

    def redact_word(self, word: str) -> str:
        """Strip noise characters, then replace word characters with the placeholder."""
        stripped = self.config.normalize_pattern.sub('', require_text(word, "word"))
        placeholder = self.config.placeholder
        return self.config.redact_pattern.sub(lambda m: placeholder, stripped)

    def clean(self, text: str) -> str:
        """
        Return a copy of the text with profane words redacted.

        The text is split on word boundaries so spacing and punctuation
        come back exactly as they went in.
        """
        segments = _WORD_BOUNDARY.split(require_text(text))
        redacted = 0
        for i, segment in enumerate(segments):
            if segment and self.is_profane(segment):
                segments[i] = self.redact_word(segment)
                redacted += 1

        if redacted:
            logger.debug(f"Redacted {redacted} words")
        return ''.join(segments)

    def add_words(self, words: Words) -> None:
        """Add words to the blacklist and remove them from the whitelist."""
        self.lexicon.add(words)

    def remove_words(self, *words: str) -> None:
        """Whitelist words so they are no longer treated as profane."""
        self.lexicon.exclude(words)
