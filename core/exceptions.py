# core/exceptions.py
"""
Typed failures raised by the provider clients and the AI orchestrator.

The HTTP shell renders each of these as a user-visible message; nothing in
the core swallows them except where the orchestrator deliberately absorbs a
failure into an answer.
"""
from typing import Any, Mapping, Optional


class DotaBotError(Exception):
    """Base class for every error the core surfaces to its caller."""

    default_message = "Dota bot error"

    def __init__(self, message: Optional[str] = None, *, context: Optional[Mapping[str, Any]] = None):
        self.message = message or self.default_message
        self.context: Mapping[str, Any] = dict(context or {})
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class UpstreamError(DotaBotError):
    """An external API answered with a non-2xx status or could not be reached."""

    default_message = "Upstream API error"

    def __init__(self, message: Optional[str] = None, *, status: Optional[int] = None,
                 context: Optional[Mapping[str, Any]] = None):
        self.status = status
        super().__init__(message, context=context)

    def _format_message(self) -> str:
        base = super()._format_message()
        return f"[{self.status}] {base}" if self.status is not None else base


class ParseError(UpstreamError):
    """The upstream body did not have the expected shape."""

    default_message = "Malformed upstream response"


class NotFoundError(DotaBotError):
    """The upstream reported that the requested entity does not exist."""

    default_message = "Not found"


class ConfigurationError(DotaBotError):
    """A credential or setting required for the operation is missing."""

    default_message = "Missing required configuration"
