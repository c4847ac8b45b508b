import threading

from invoice_dashboard.review.state import ReviewState


class ReviewStore:
    """In-process registry of one ReviewState per user.

    Only ``get`` registers a state; ``peek`` hands out an unregistered empty
    state for users who never extracted anything.
    """

    def __init__(self) -> None:
        self._states: dict[str, ReviewState] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._states)

    def get(self, user_id: str) -> ReviewState:
        with self._lock:
            state = self._states.get(user_id)
            if state is None:
                state = self._states[user_id] = ReviewState()
            return state

    def peek(self, user_id: str) -> ReviewState:
        with self._lock:
            return self._states.get(user_id) or ReviewState()

    def discard(self, user_id: str) -> None:
        with self._lock:
            self._states.pop(user_id, None)
