"""Custom exceptions for reading CSV sources."""


class SourceReadError(Exception):
    """The CSV source could not be read.

    This is the only failure the parsing layer raises. Malformed CSV content
    never produces an exception; it degrades into fewer or emptier records.
    """

    def __init__(self, message: str, source_name: str = "") -> None:
        """Initialize read error.

        Args:
            message: Human-readable error message (surfaced as an import warning)
            source_name: Optional name of the source that failed
        """
        super().__init__(message)
        self.source_name = source_name
