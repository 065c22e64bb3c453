class DateExtractionError(Exception):
    """Raised when an extractor cannot turn a message into a date context"""

    def __init__(self, message: str, raw_response: str | None = None):
        super().__init__(message)
        self.raw_response = raw_response
