class ModelError(Exception):
    """Raised when the model provider call fails or returns nothing usable."""


class ModelNetworkError(ModelError):
    """Raised when the model provider is unreachable or rejects the request."""
