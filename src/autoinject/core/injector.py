"""
Injector — fills marked attributes of any object with implementations chosen by configuration.
Contract identifiers are looked up in the table; the implementation is created via the registry.
"""
from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from autoinject.core.config import (
    DEFAULT_RESOURCE,
    ConfigurationSource,
    PropertiesFileSource,
    ResourceSource,
    Settings,
)
from autoinject.core.errors import (
    AssignmentFailure,
    ConfigurationReadError,
    ContractViolation,
    InvalidArgument,
    UnresolvedDependency,
)
from autoinject.core.marker import (
    InjectableField,
    contract_name,
    injectable_fields,
    is_contract,
    is_runtime_checkable,
)
from autoinject.core.registry import ImplementationRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _freeze(source: ConfigurationSource) -> Mapping[str, str]:
    table = source.load()
    frozen: dict[str, str] = {}
    for key, value in table.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ConfigurationReadError(repr(source), f"non-string binding {key!r}={value!r}")
        frozen[key] = value
    return MappingProxyType(frozen)


class Injector:
    """
    Resolve marked attributes to implementations and assign them.

        injector = Injector(ResourceSource("myapp"), registry)
        bean = injector.inject(SomeBean())

    The table is loaded once here and never changes; inject() keeps no other state,
    so one Injector can serve any number of targets (one target at a time per object).
    """

    def __init__(
        self,
        source: ConfigurationSource,
        registry: ImplementationRegistry | None = None,
        *,
        allow_import: bool = False,
    ) -> None:
        self._table = _freeze(source)
        # The registry may be shared; the import permission stays on this Injector.
        self._registry = registry if registry is not None else ImplementationRegistry()
        self._allow_import = allow_import
        logger.debug("Injector ready with %d bindings", len(self._table))

    @classmethod
    def from_properties(
        cls,
        path: str | os.PathLike[str],
        registry: ImplementationRegistry | None = None,
        *,
        allow_import: bool = False,
    ) -> Injector:
        return cls(PropertiesFileSource(path), registry, allow_import=allow_import)

    @classmethod
    def from_resource(
        cls,
        package: str,
        name: str = DEFAULT_RESOURCE,
        registry: ImplementationRegistry | None = None,
        *,
        allow_import: bool = False,
    ) -> Injector:
        return cls(ResourceSource(package, name), registry, allow_import=allow_import)

    @classmethod
    def from_settings(cls, settings: Settings, registry: ImplementationRegistry | None = None) -> Injector:
        return cls(settings.source(), registry, allow_import=settings.allow_import)

    @property
    def properties(self) -> dict[str, str]:
        """Copy of the loaded table. Changing it does not affect the Injector."""
        return dict(self._table)

    @property
    def registry(self) -> ImplementationRegistry:
        return self._registry

    @property
    def allow_import(self) -> bool:
        """Whether unregistered identifiers may be imported by dotted path."""
        return self._allow_import or self._registry.allow_import

    def implementation_for(self, contract: Any, field: str | None = None) -> str:
        """Implementation identifier bound to contract (trimmed)."""
        key = contract_name(contract)
        implementation = self._table.get(key)
        if implementation is None or not implementation.strip():
            raise UnresolvedDependency(key, field)
        return implementation.strip()

    def resolve(self, contract: type[T], field: str | None = None) -> T:
        """Create a new implementation of contract as configured."""
        if not is_contract(contract):
            raise ContractViolation(field or "<none>", contract)
        class_name = self.implementation_for(contract, field)
        instance = self._registry.create(class_name, field, allow_import=self.allow_import)
        if is_runtime_checkable(contract) and not isinstance(instance, contract):
            raise ContractViolation(
                field or "<none>",
                contract,
                f"Implementation {class_name} does not satisfy {contract_name(contract)}"
                + (f" (field: {field})" if field else ""),
            )
        return instance

    def _inject_field(self, target: Any, field: InjectableField) -> None:
        implementation = self.resolve(field.contract, field.name)
        try:
            # Bypasses properties, __setattr__ overrides and frozen dataclasses.
            object.__setattr__(target, field.name, implementation)
        except (AttributeError, TypeError) as e:
            raise AssignmentFailure(field.name, str(e)) from e
        logger.debug(
            "Injected %s.%s <- %s",
            type(target).__qualname__,
            field.name,
            type(implementation).__qualname__,
        )

    def inject(self, target: T) -> T:
        """
        Fill every marked attribute declared on type(target) and return target itself.
        Stops at the first failing attribute; attributes filled before it stay filled.
        """
        if target is None:
            raise InvalidArgument("Inject object cannot be None")
        for field in injectable_fields(type(target)):
            self._inject_field(target, field)
        return target
