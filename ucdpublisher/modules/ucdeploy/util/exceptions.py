"""Exception hierarchy for the version publishing workflow."""

from __future__ import annotations


class UcdAbortException(Exception):
    """Aborts the whole run with a single human-readable message."""


class UcdValidationException(UcdAbortException):
    """Input rejected locally, before any remote call."""


class UcdTransportException(UcdAbortException):
    """The server could not be reached or answered with an HTTP error."""


class UcdResponseException(UcdAbortException):
    """The server replied with a body we could not interpret."""
