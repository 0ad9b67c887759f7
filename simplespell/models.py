"""
Data models for SimpleSpell.

These models represent the output of checking and correcting text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SpellCheckItem:
    """
    A suspected misspelling and its ranked alternatives.

    Alternatives are ordered by descending corpus frequency and may be empty.

    Example:
        >>> item = SpellCheckItem("teh", ("the", "ten"))
        >>> item.top_suggestion
        'the'
    """

    suspected_word: str
    suggested_alternatives: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "suggested_alternatives", tuple(self.suggested_alternatives))

    @property
    def has_suggestions(self) -> bool:
        """Whether at least one alternative was found."""
        return bool(self.suggested_alternatives)

    @property
    def top_suggestion(self) -> str | None:
        """Most likely alternative, or None."""
        if not self.suggested_alternatives:
            return None
        return self.suggested_alternatives[0]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "suspected_word": self.suspected_word,
            "suggested_alternatives": list(self.suggested_alternatives),
        }


@dataclass
class CorrectionResult:
    """Result of auto-correcting a block of text."""

    original_text: str
    corrected_text: str
    items: list[SpellCheckItem] = field(default_factory=list)
    corrections_made: int = 0  # Number of replaced occurrences

    @property
    def changed(self) -> bool:
        """Whether any correction altered the text."""
        return self.corrected_text != self.original_text

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "original_text": self.original_text,
            "corrected_text": self.corrected_text,
            "items": [item.to_dict() for item in self.items],
            "corrections_made": self.corrections_made,
        }
