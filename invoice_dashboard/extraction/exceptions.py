class ExtractionError(Exception):
    """Raised when an invoice extraction attempt fails."""


class MissingInputError(ExtractionError):
    """Raised when neither (or both) of a file and text were provided."""


class EmptyResponseError(ExtractionError):
    """Raised when the model returns blank text."""


class MalformedResponseError(ExtractionError):
    """Raised when the model response is not a JSON object."""
