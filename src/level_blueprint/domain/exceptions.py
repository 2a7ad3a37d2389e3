"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class LevelBlueprintError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class MissingCredentialError(LevelBlueprintError):
    """The caller did not supply an upstream API key."""


class MissingFieldError(LevelBlueprintError):
    """One or more required level parameters are absent."""


# ── Upstream errors ─────────────────────────────────────────────────────────


class UpstreamError(LevelBlueprintError):
    """The completion API answered with a non-success status.

    ``detail`` holds the upstream error body verbatim.
    """

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class TransportError(LevelBlueprintError):
    """The call to the completion API could not be completed."""


# ── Processing errors ───────────────────────────────────────────────────────


class UnexpectedError(LevelBlueprintError):
    """Any other failure while serving a request."""
