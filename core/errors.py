"""Exceptions raised by the route selection engine."""


class InvalidGraphError(ValueError):
    """Raised when a graph violates the solver's contract (e.g. negative weights)."""
