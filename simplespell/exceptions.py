"""
Exception classes for SimpleSpell.

All SimpleSpell exceptions inherit from SimpleSpellError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     speller.build_corpus_from_file("missing.txt")
    ... except simplespell.CorpusLoadError as e:
    ...     print(f"Could not load corpus: {e}")
    ... except simplespell.SimpleSpellError as e:
    ...     print(f"SimpleSpell error: {e}")
"""


class SimpleSpellError(Exception):
    """
    Base exception for all SimpleSpell errors.

    Catch this to handle any SimpleSpell-specific error.
    """

    pass


class NotInitializedError(SimpleSpellError):
    """
    Raised when the frequency model is queried before it has been built.

    Example:
        >>> Speller().suggest_alternatives("teh")
        NotInitializedError: Corpus not built. Call build_corpus() first.
    """

    def __init__(self, message: str | None = None):
        super().__init__(
            message or "Corpus not built. Call build_corpus() before querying the model."
        )


class CorpusLoadError(SimpleSpellError):
    """
    Raised when a corpus source cannot be read.

    The underlying I/O or decoding error is chained as __cause__.
    A failed load never touches an already-built model.
    """

    pass


class ConfigurationError(SimpleSpellError):
    """
    Raised for invalid configuration.

    Example:
        >>> SpellCheckConfig(alphabet="")
        ConfigurationError: alphabet must not be empty
    """

    pass
