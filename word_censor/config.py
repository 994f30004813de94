"""
Configuration loader for word_censor.

Loads settings from YAML config file with sensible defaults.
"""

import logging
import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import yaml

from .error_handler import InvalidInputError

logger = logging.getLogger(__name__)


# Everything except letters, digits and the leetspeak characters | $ @
DEFAULT_NORMALIZE_REGEX = r"[^a-zA-Z0-9|$@]"
DEFAULT_REDACT_REGEX = r"\w"
DEFAULT_PLACEHOLDER = "*"


def compile_pattern(value: Union[str, re.Pattern], name: str) -> re.Pattern:
    """Compile a user-supplied pattern, reporting bad input as InvalidInputError."""
    if isinstance(value, re.Pattern):
        return value
    if not isinstance(value, str):
        raise InvalidInputError(
            f"'{name}' must be a regular expression",
            f"{name} must be str or compiled pattern, got {type(value).__name__}"
        )
    try:
        return re.compile(value)
    except re.error as e:
        raise InvalidInputError(
            f"'{name}' is not a valid regular expression: {e}",
            f"re.compile({value!r}) failed: {e}"
        ) from e


@dataclass(frozen=True)
class FilterConfig:
    """Redaction and normalization settings. Immutable once built."""
    placeholder: str = DEFAULT_PLACEHOLDER
    normalize_regex: Union[str, re.Pattern] = DEFAULT_NORMALIZE_REGEX
    redact_regex: Union[str, re.Pattern] = DEFAULT_REDACT_REGEX
    normalize_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    redact_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.placeholder, str) or len(self.placeholder) != 1:
            raise InvalidInputError(
                "The placeholder must be a single character",
                f"placeholder={self.placeholder!r}"
            )
        object.__setattr__(
            self, "normalize_pattern", compile_pattern(self.normalize_regex, "normalize_regex")
        )
        object.__setattr__(
            self, "redact_pattern", compile_pattern(self.redact_regex, "redact_regex")
        )


@dataclass
class ListConfig:
    """Which words make up the blacklist and whitelist."""
    empty_list: bool = False
    words: Optional[List[str]] = None  # Replaces the default list entirely
    add_words: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    custom_wordlist_path: str = ""  # Extra blacklist words, one per line
    exclude_path: str = ""  # Extra whitelist words, one per line


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    log_file: str = ""


@dataclass
class Config:
    """Main configuration container."""
    filter: FilterConfig = field(default_factory=FilterConfig)
    lists: ListConfig = field(default_factory=ListConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    
    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from YAML file.
        
        If no path is provided, uses default values.
        Missing keys in the config file will use defaults; unknown keys
        are ignored.
        """
        config = cls()
        
        if config_path and config_path.exists():
            logger.info(f"Loading configuration from {config_path}")
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            
            # FilterConfig is frozen, so rebuild it from the known keys
            if 'filter' in data:
                known = {
                    key: value for key, value in (data['filter'] or {}).items()
                    if key in ('placeholder', 'normalize_regex', 'redact_regex')
                }
                config.filter = FilterConfig(**known)
            
            if 'lists' in data:
                for key, value in (data['lists'] or {}).items():
                    if hasattr(config.lists, key):
                        setattr(config.lists, key, value)
            
            if 'logging' in data:
                for key, value in (data['logging'] or {}).items():
                    if hasattr(config.logging, key):
                        setattr(config.logging, key, value)
        elif config_path:
            logger.warning(f"Config file not found: {config_path}, using defaults")
        
        return config

    def save(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        data = {
            'filter': {
                'placeholder': self.filter.placeholder,
                'normalize_regex': self.filter.normalize_pattern.pattern,
                'redact_regex': self.filter.redact_pattern.pattern,
            },
            'lists': asdict(self.lists),
            'logging': asdict(self.logging),
        }
        logger.info(f"Saving configuration to {config_path}")
        
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, default_flow_style=False)
