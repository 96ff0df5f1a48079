class LCSError(Exception):
    """Base class for errors raised by lcsdiff."""


class ConfigError(LCSError, ValueError):
    """Raised when an engine configuration key or value is invalid."""


class EnumerationLimitError(LCSError, MemoryError):
    """
    Raised when enumerating all longest common subsequences would produce more
    distinct results than the configured MAX_RESULTS allows.

    Attributes:
        limit (int): The configured cap.
        cell (tuple): The (i, j) table cell at which the cap was exceeded.
    """

    def __init__(self, limit, cell):
        self.limit = limit
        self.cell = cell
        super().__init__(
            f"more than {limit} distinct subsequences at cell {cell}; "
            "bound the input size or raise MAX_RESULTS")
