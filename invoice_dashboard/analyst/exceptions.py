class AnalystQueryError(Exception):
    """Raised when a natural-language question cannot be answered."""


class NoDataError(AnalystQueryError):
    """Raised when there are no saved invoices to analyze."""


class EmptyAnswerError(AnalystQueryError):
    """Raised when the model returns a blank answer."""
