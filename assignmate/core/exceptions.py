"""Custom exception hierarchy for crossword layout generation."""


class CrosswordError(Exception):
    """Base exception for layout failures."""


class PlacementFailure(CrosswordError):
    """Raised when a word has no valid crossing with the words already placed."""

    def __init__(self, word: str, reason: str = "no valid crossing") -> None:
        super().__init__(f"Could not place '{word}': {reason}")
        self.word = word
        self.reason = reason


class SlotPlacementError(CrosswordError):
    """Raised when writing a word would leave the grid or overwrite a letter."""


class WordSourceError(CrosswordError):
    """Raised when no usable words can be collected from the configured sources."""


class QuestionBankError(CrosswordError):
    """Raised when the question-bank API cannot be reached or answers badly."""


class ValidationError(CrosswordError):
    """Raised when the layout integrity checks fail."""
