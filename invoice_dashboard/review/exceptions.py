class InvalidReviewTransitionError(Exception):
    """Raised when a review action is not allowed in the current state."""
