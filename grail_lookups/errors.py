"""
Error hierarchy for the Grail lookup integration.

Every failure detected by this package is raised as one of the
LookupIntegrationError subclasses below. Network failures that happen
before any response is received are NOT wrapped: they propagate as
httpx's own transport exceptions, re-exported here as TransportError.
"""

from typing import Any, Optional

import httpx


class LookupIntegrationError(Exception):
    """Base exception for all lookup integration errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class ValidationError(LookupIntegrationError):
    """
    Malformed or missing input, detected before any I/O.

    Examples:
    - Missing required field
    - filePath outside /lookups
    - displayName longer than 500 characters
    - Unparseable JSON descriptor
    """
    pass


class ConfigurationError(LookupIntegrationError):
    """
    Misconfigured pipeline.

    Examples:
    - Credential vault returned nothing
    - Previous step result without filePath
    """
    pass


class RemoteError(LookupIntegrationError):
    """Non-2xx response from the remote service."""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# No response obtained (DNS, connection reset, timeout)
TransportError = httpx.TransportError
