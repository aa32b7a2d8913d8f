"""Domain-level exceptions.

Every error the order core can raise is a subclass of DomainException
so the CLI layer can catch them uniformly and display a one-line message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object or configuration value was invalid."""


class UnknownItemError(DomainException):
    """A menu item key is not present in the catalog."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown menu item: '{key}'")
        self.key = key
