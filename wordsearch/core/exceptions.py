"""Custom exception hierarchy for word search generation and play."""


class WordSearchError(Exception):
    """Base exception for engine failures."""


class GridBuildError(WordSearchError):
    """Raised when a grid cannot be allocated from the given parameters."""


class VocabularyError(WordSearchError):
    """Raised when a word pool is missing, too small or cannot be read."""


class SelectionError(WordSearchError):
    """Raised when drag events arrive out of order or outside the grid."""


class ValidationError(WordSearchError):
    """Raised when the grid integrity checks fail."""
