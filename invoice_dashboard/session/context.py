from dataclasses import dataclass


class AuthRequiredError(Exception):
    """Raised when an operation needs an authenticated user and has none."""


@dataclass(frozen=True)
class UserContext:
    """Authenticated user identity, passed explicitly to user-scoped calls."""

    user_id: str

    @classmethod
    def from_identity(cls, user_id: str | None) -> "UserContext":
        """Build a context from an identity supplied by the auth layer.

        Raises:
            AuthRequiredError: if the identity is missing or blank.
        """
        if user_id is None or not user_id.strip():
            raise AuthRequiredError("Authentication required.")
        return cls(user_id=user_id.strip())
