from typing import Protocol


class CredentialProvider(Protocol):
    """Interface for anything that hands out short-lived bearer tokens."""

    async def get_access_token(self) -> str:
        """Return a bearer token.

        Raises:
            CredentialError: If no token could be obtained.
        """
        ...

    def invalidate(self) -> None:
        """Forget any cached token so the next call fetches a fresh one."""
        ...
