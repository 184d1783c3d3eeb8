"""Custom exceptions for modeltime."""

from __future__ import annotations


class ModeltimeError(Exception):
    """Base exception for modeltime."""


class ConfigError(ModeltimeError):
    """Invalid configuration."""


class NotFinalizedError(ModeltimeError):
    """Derived state was read before ``finalize`` ran."""


class PeriodError(ModeltimeError, IndexError):
    """Period or data-period index out of range."""


class UnknownYearError(ModeltimeError, KeyError):
    """Calendar year outside the modeled span."""

    def __init__(self, year: int) -> None:
        super().__init__(year)
        self.year = year

    def __str__(self) -> str:
        return f"Year {self.year} is not covered by the model periods"
