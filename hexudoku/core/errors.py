"""Exception types raised by the puzzle engine."""


class HexudokuError(Exception):
    """Base class for all engine errors."""


class ContractViolation(HexudokuError):
    """A caller or topology bug, e.g. looking up a coordinate that is not on the board."""


class GenerationError(HexudokuError):
    """
    The random fill could not produce a usable solved board.

    ``stats`` holds the ``FillStats`` of the failed call when the fill got
    far enough to collect any.
    """

    def __init__(self, message, stats=None):
        super().__init__(message)
        self.stats = stats


class DeserialisationError(HexudokuError):
    """A serialised board could not be decoded or failed schema validation."""
