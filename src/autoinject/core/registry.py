"""Implementation registry: identifier -> zero-argument factory. Configuration selects among these."""
from __future__ import annotations

import importlib
import logging
from typing import Any, Callable, TypeVar, overload

from autoinject.core.errors import InstantiationFailure
from autoinject.core.marker import contract_name

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _import_object(path: str) -> Any:
    """Import "package.module.Name" or "package.module:Name"."""
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ImportError(f"Not a dotted path: {path!r}")
    obj: Any = importlib.import_module(module_name)
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj


class ImplementationRegistry:
    """
    Register implementations by identifier and create fresh instances on demand.
    Nothing is cached: every create() call constructs a new object.

    With allow_import=True, identifiers that were never registered are imported
    by dotted path. Off by default so configuration cannot load arbitrary code.
    """

    def __init__(self, *, allow_import: bool = False) -> None:
        self._factories: dict[str, Callable[[], Any]] = {}
        self.allow_import = allow_import

    @overload
    def register(self, impl: type[T], name: str | None = None) -> type[T]: ...

    @overload
    def register(self, impl: None = None, name: str | None = None) -> Callable[[type[T]], type[T]]: ...

    def register(self, impl: Any = None, name: str | None = None) -> Any:
        """Register a class under its identifier (or name). Works as a decorator too."""
        if impl is None:
            def decorator(cls: type[T]) -> type[T]:
                return self.register(cls, name)
            return decorator
        self.register_factory(name or contract_name(impl), impl)
        return impl

    def register_factory(self, name: str, factory: Callable[[], Any]) -> None:
        """Register any zero-argument callable under name."""
        if not callable(factory):
            raise TypeError(f"Factory for {name!r} is not callable: {factory!r}")
        self._factories[name] = factory
        logger.debug("Registered implementation: %s", name)

    def names(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def _factory(self, name: str, allow_import: bool) -> Callable[[], Any]:
        if name in self._factories:
            return self._factories[name]
        if not allow_import:
            raise LookupError(f"Implementation is not registered: {name}")
        factory = _import_object(name)
        if not callable(factory):
            raise TypeError(f"{name} is not callable")
        return factory

    def create(self, name: str, field: str | None = None, *, allow_import: bool | None = None) -> Any:
        """
        Construct a new instance of the implementation registered (or importable) as name.
        allow_import overrides the registry flag for this call only.
        """
        if allow_import is None:
            allow_import = self.allow_import
        try:
            factory = self._factory(name, allow_import)
            return factory()
        except Exception as e:
            raise InstantiationFailure(name, field, f"{type(e).__name__}: {e}") from e
