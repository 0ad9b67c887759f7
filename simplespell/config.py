"""
Configuration for SimpleSpell.

Configuration can be built in code or loaded from a YAML file:

    alphabet: abcdefghijklmnopqrstuvwxyz
    max_word_length: 20
    corpus_path: corpora/big.txt
    corpus_encoding: utf-8
"""

from __future__ import annotations

import string
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from simplespell.exceptions import ConfigurationError

# Letters used for substitution and insertion candidates
DEFAULT_ALPHABET = string.ascii_lowercase


@dataclass
class SpellCheckConfig:
    """
    Configuration for spelling suggestion and correction.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = SpellCheckConfig(max_word_length=20)
        >>> speller = Speller(config)
    """

    # Candidate generation
    alphabet: str = DEFAULT_ALPHABET  # Ordered letters for substitutions/insertions

    # Search guard: unknown words longer than this get no suggestions (None = unbounded)
    max_word_length: int | None = None

    # Corpus source (used by the CLI and Speller.from_config)
    corpus_path: Path | None = None
    corpus_encoding: str = "utf-8"

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.alphabet, str):
            raise ConfigurationError(
                f"alphabet must be a string, got {type(self.alphabet).__name__}"
            )
        if not self.alphabet:
            raise ConfigurationError("alphabet must not be empty")
        invalid = sorted(set(self.alphabet) - set(DEFAULT_ALPHABET))
        if invalid:
            raise ConfigurationError(
                f"alphabet may only contain lowercase a-z, got {''.join(invalid)!r}"
            )
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ConfigurationError(f"alphabet contains duplicate letters: {self.alphabet!r}")

        if self.max_word_length is not None and (
            isinstance(self.max_word_length, bool) or not isinstance(self.max_word_length, int)
        ):
            raise ConfigurationError(
                f"max_word_length must be an integer, got {self.max_word_length!r}"
            )
        if self.max_word_length is not None and self.max_word_length < 1:
            raise ConfigurationError(f"max_word_length must be >= 1, got {self.max_word_length}")

        if not isinstance(self.corpus_encoding, str) or not self.corpus_encoding:
            raise ConfigurationError(
                f"corpus_encoding must be a non-empty string, got {self.corpus_encoding!r}"
            )

        if self.corpus_path is not None:
            if not isinstance(self.corpus_path, (str, Path)):
                raise ConfigurationError(
                    f"corpus_path must be a path string, got {self.corpus_path!r}"
                )
            self.corpus_path = Path(self.corpus_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpellCheckConfig:
        """
        Create a config from a mapping, rejecting unknown keys.

        Args:
            data: Option names mapped to values.

        Returns:
            Validated SpellCheckConfig.

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SpellCheckConfig:
        """
        Load a config from a YAML file.

        A relative corpus_path is resolved against the file's directory.

        Raises:
            ConfigurationError: If the file is missing, not valid YAML,
                or does not hold a mapping of known options.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config root must be a mapping: {path}")

        corpus_path = data.get("corpus_path")
        if isinstance(corpus_path, str) and not Path(corpus_path).is_absolute():
            data["corpus_path"] = path.parent / corpus_path

        return cls.from_dict(data)
