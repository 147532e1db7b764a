from __future__ import annotations


class TransactionError(Exception):
    """Base class for failures captured into ``EngineState.last_error``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"Transaction failed for {self.name!r}"


class UnknownItemError(TransactionError):
    """The submitted short name matches no catalog entry."""

    def describe(self) -> str:
        return f"Unknown item: {self.name!r}"


class SellNotImplementedError(TransactionError):
    """Selling has no defined economics yet."""

    def describe(self) -> str:
        return f"Selling is not implemented (tried to sell {self.name!r})"


class CatalogError(ValueError):
    """Raised by the loader when a catalog source is malformed."""
