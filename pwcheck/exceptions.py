"""Boundary errors raised before any candidate is evaluated."""


class PwcheckError(Exception):
    """Base class for pwcheck errors."""


class InputSourceError(PwcheckError):
    """The candidate input file is missing or cannot be opened."""


class OutputSinkError(PwcheckError):
    """The results file cannot be created."""
