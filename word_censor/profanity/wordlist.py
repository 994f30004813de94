"""
Default profanity word list and custom list files.

The default list is static data: plain lowercase terms plus the
obfuscated spellings that survive normalization (digits and the
leetspeak characters $ @ |). Custom lists are text files with one
word per line; lines starting with # are comments.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Set, Tuple, Union

logger = logging.getLogger(__name__)


# Base terms grouped by family, with the spelling variants seen in the wild
PROFANITY_STEMS = {
    # F-word family
    "fuck": ["fuck", "fuk", "fck", "fuq", "phuck", "fvck", "fxck", "fucks"],
    "fucking": ["fucking", "fuking", "fcking", "fukking", "fkin", "effing"],
    "fucker": ["fucker", "fukker", "fcker", "fuckers"],
    "fucked": ["fucked", "fukked", "fcked"],
    "motherfucker": ["motherfucker", "motherfucking", "mofo", "muthafucka"],

    # S-word family
    "shit": ["shit", "sh1t", "shyt", "shits", "shitty", "shitting"],
    "bullshit": ["bullshit", "bullsh1t", "horseshit", "dipshit"],
    "shithead": ["shithead", "shitface"],

    # A-word family
    "ass": ["ass", "a$$", "arse", "asses"],
    "asshole": ["asshole", "a$$hole", "arsehole", "assholes", "asshat", "asswipe"],
    "dumbass": ["dumbass", "dumba$$", "jackass", "jacka$$"],

    # B-word family
    "bitch": ["bitch", "b1tch", "biatch", "biotch", "bitches", "bitchy"],
    "bastard": ["bastard", "b@stard", "bastards"],

    # Mild
    "damn": ["damn", "dammit", "damnit", "goddamn", "goddammit"],
    "crap": ["crap", "cr@p", "crappy"],
    "piss": ["piss", "pissed", "pissing"],
    "jerk": ["jerk", "jerkoff"],
    "turd": ["turd"],
    "douche": ["douche", "douchebag"],
    "wanker": ["wanker", "wank", "tosser"],

    # Crude anatomical
    "dick": ["dick", "d1ck", "dickhead", "dickweed"],
    "cock": ["cock", "c0ck", "cocksucker"],
    "pussy": ["pussy", "pu$$y", "pussies"],
    "cunt": ["cunt", "cunts"],
    "twat": ["twat", "tw@t"],
    "tits": ["tits", "titties"],

    # Whore/slut
    "whore": ["whore", "wh0re", "whores"],
    "slut": ["slut", "s1ut", "sluts", "slutty"],

    # Slurs
    "nigger": ["nigger", "niggers", "nigga", "niggas"],
    "faggot": ["faggot", "f@ggot", "faggots", "fag", "fags"],
    "retard": ["retard", "retarded", "retards"],
    "spic": ["spic", "spick"],
    "kike": ["kike"],
    "chink": ["chink"],
    "wetback": ["wetback"],
}


def _build_default_list() -> Tuple[str, ...]:
    """Flatten the stem table into a sorted, lowercase, duplicate-free tuple."""
    words = set()
    for stem, variants in PROFANITY_STEMS.items():
        words.add(stem)
        words.update(variants)
    return tuple(sorted(w.lower() for w in words))


DEFAULT_PROFANITY: Tuple[str, ...] = _build_default_list()


def _read_word_lines(path: Path) -> List[str]:
    words = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.strip().lower()
            if word and not word.startswith('#'):
                words.append(word)
    return words


def load_word_file(path: Union[str, Path]) -> List[str]:
    """
    Load words from a list file without merging in any defaults.

    Raises:
        FileNotFoundError: if the file does not exist
    """
    path = Path(path)
    words = _read_word_lines(path)
    logger.info(f"Loaded {len(words)} words from {path}")
    return words


def load_profanity_list(custom_path: str = "") -> Set[str]:
    """
    Load profanity word list.

    If a custom path is provided, loads words from that file (one per line)
    and MERGES with the default list.

    Args:
        custom_path: Optional path to custom word list file

    Returns:
        Set of profanity words (lowercase)
    """
    words = set(DEFAULT_PROFANITY)

    if not custom_path:
        logger.info(f"Using default profanity list ({len(words)} words)")
        return words

    path = Path(custom_path)
    if not path.exists():
        logger.warning(f"Custom word list not found: {path}, using default")
        return words

    try:
        custom = _read_word_lines(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to load custom word list: {e}, using default")
        return set(DEFAULT_PROFANITY)

    custom_count = len(set(custom) - words)
    words.update(custom)
    logger.info(f"Loaded profanity list: {len(words)} words ({custom_count} custom from {path})")
    return words


def save_profanity_list(words: Iterable[str], output_path: Union[str, Path]) -> None:
    """Save a word list to a file, sorted, one word per line."""
    words = sorted({w.lower() for w in words})
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write("# Profanity word list for word_censor\n")
        f.write("# One word per line, lines starting with # are comments\n\n")
        for word in words:
            f.write(f"{word}\n")

    logger.info(f"Saved {len(words)} words to {output_path}")
