"""Injection errors: one type per failure kind, all rooted at InjectionError."""
from __future__ import annotations

from typing import Any


class InjectionError(Exception):
    """Base error for configuration loading and field injection."""


class ConfigurationError(InjectionError):
    """Configuration table could not be produced. No Injector is built."""

    def __init__(self, message: str, source: str) -> None:
        self.source = source
        super().__init__(message)


class ConfigurationNotFound(ConfigurationError):
    def __init__(self, source: str) -> None:
        super().__init__(f"Configuration not found: {source}", source)


class ConfigurationReadError(ConfigurationError):
    def __init__(self, source: str, reason: str = "") -> None:
        message = f"Error reading the configuration: {source}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, source)


class InvalidArgument(InjectionError, ValueError):
    """Raised before any field is touched, e.g. inject(None)."""


class ContractViolation(InjectionError, TypeError):
    """
    Marked field is not declared with a contract type,
    or the constructed instance does not satisfy the contract.
    """

    def __init__(self, field: str, declared_type: Any, message: str | None = None) -> None:
        self.field = field
        self.declared_type = declared_type
        if message is None:
            message = f"Field {field} should be a contract (Protocol or abstract class), but it has a type: {declared_type!r}"
        super().__init__(message)


class UnresolvedDependency(InjectionError, LookupError):
    def __init__(self, contract: str, field: str | None = None) -> None:
        self.contract = contract
        self.field = field
        message = f"No implementation found for the contract: {contract}"
        if field is not None:
            message = f"{message} (field: {field})"
        super().__init__(message)


class InstantiationFailure(InjectionError):
    """Concrete type unknown or its zero-argument construction failed. Cause is chained."""

    def __init__(self, class_name: str, field: str | None = None, reason: str = "") -> None:
        self.class_name = class_name
        self.field = field
        message = f"Failed to create an instance of the class: {class_name}"
        if field is not None:
            message = f"{message} (field: {field})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AssignmentFailure(InjectionError):
    def __init__(self, field: str, reason: str = "") -> None:
        self.field = field
        message = f"Injection error in the field: {field}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
