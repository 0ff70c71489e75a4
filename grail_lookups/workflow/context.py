"""Interfaces of the external collaborators consumed by the workflow actions."""

from typing import Any, Optional, Protocol


class Credential(Protocol):
    """Resolved vault credential."""

    token: str


class CredentialVault(Protocol):
    """Resolves a credential identifier to a token-bearing credential."""

    async def get_credentials_details(self, credential_id: str) -> Optional[Credential]:
        """
        Args:
            credential_id: Opaque vault identifier

        Returns:
            Credential exposing `token`, or None if nothing was resolved
        """
        ...


class StepResultSource(Protocol):
    """Gives access to the results of previous workflow steps."""

    async def result(self, step_name: str) -> Any:
        """Return a wrapper exposing `content`, or a bare value."""
        ...


class QueryExecutor(Protocol):
    """Executes DQL queries."""

    async def query_execute(self, query: str) -> Any:
        """Return an object (or mapping) with an optional `records` array."""
        ...
