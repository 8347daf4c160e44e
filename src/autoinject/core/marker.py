"""
Injection marker: tag class attributes with Inject[Contract] (or Annotated[Contract, AutoInjectable()]).
The Injector discovers tagged attributes from the class's own annotations.
"""
from __future__ import annotations

import inspect
import re
import sys
import types
from dataclasses import dataclass
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin, get_type_hints

from autoinject.core.errors import ContractViolation

T = TypeVar("T")


class AutoInjectable:
    """
    Marks a class attribute for field injection by the Injector.

    Usage::

        class SomeBean:
            _field1: Inject[SomeInterface] = None
            _field2: Annotated[SomeOtherInterface, AutoInjectable()] = None

    The marker is pure metadata: it does nothing until Injector.inject() reads it.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "AutoInjectable()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AutoInjectable)

    def __hash__(self) -> int:
        return hash(AutoInjectable)


Inject = Annotated[T, AutoInjectable()]


@dataclass(frozen=True)
class InjectableField:
    """Attribute name and the contract it is declared with."""
    name: str
    contract: Any


def contract_name(tp: Any) -> str:
    """Fully-qualified identifier used as key in the configuration table."""
    if isinstance(tp, type):
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def is_contract(tp: Any) -> bool:
    """True for Protocol classes and for abstract classes (abstract methods still pending)."""
    if not isinstance(tp, type):
        return False
    if getattr(tp, "_is_protocol", False):
        return True
    return inspect.isabstract(tp)


def is_runtime_checkable(tp: Any) -> bool:
    """Whether isinstance() can be used to verify an implementation against the contract."""
    if getattr(tp, "_is_protocol", False):
        return bool(getattr(tp, "_is_runtime_protocol", False))
    return isinstance(tp, type)


_UNRESOLVED = (NameError, AttributeError, SyntaxError, TypeError)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _resolve_annotation(name: str, ann: str, cls: type[Any]) -> Any:
    """Resolve one string annotation (from __future__ annotations) against the defining module and class."""
    holder = type(cls.__name__, (), {"__module__": cls.__module__, "__annotations__": {name: ann}})
    localns = dict(vars(cls))
    localns.setdefault(cls.__name__, cls)
    return get_type_hints(holder, localns=localns, include_extras=True)[name]


def _mentions_marker(ann: str, cls: type[Any]) -> bool:
    """Whether an unresolvable string annotation names the marker or a marker alias."""
    mod = sys.modules.get(cls.__module__)
    for ident in _IDENTIFIER.findall(ann):
        if ident in ("Inject", "AutoInjectable"):
            return True
        value = getattr(mod, ident, None) if mod is not None else None
        if value is AutoInjectable or _marked_contract(value)[0]:
            return True
    return False


def _own_annotations(cls: type[Any]) -> dict[str, Any]:
    # Own annotations only: fields inherited from base classes are not scanned.
    try:
        return inspect.get_annotations(cls, eval_str=True)
    except _UNRESOLVED:
        raw = inspect.get_annotations(cls)
    annotations: dict[str, Any] = {}
    for name, ann in raw.items():
        if isinstance(ann, str):
            try:
                ann = _resolve_annotation(name, ann, cls)
            except _UNRESOLVED as e:
                if _mentions_marker(ann, cls):
                    raise ContractViolation(
                        name,
                        ann,
                        f"Field {name} is marked for injection, but its type {ann!r} cannot be resolved: {e}",
                    ) from e
                continue
        annotations[name] = ann
    return annotations


def _marked_contract(ann: Any) -> tuple[bool, Any]:
    origin = get_origin(ann)
    if origin is Annotated:
        declared, *metadata = get_args(ann)
        if any(isinstance(m, AutoInjectable) for m in metadata):
            return True, declared
        return False, None
    # Optional[Inject[X]] is marked, but the union itself is never a contract.
    if origin is Union or origin is types.UnionType:
        if any(_marked_contract(arg)[0] for arg in get_args(ann)):
            return True, ann
    return False, None


def injectable_fields(cls: type[Any]) -> list[InjectableField]:
    """Marked attributes declared directly on cls, in declaration order."""
    fields: list[InjectableField] = []
    for name, ann in _own_annotations(cls).items():
        marked, declared = _marked_contract(ann)
        if marked:
            fields.append(InjectableField(name=name, contract=declared))
    return fields


def is_injectable(cls: type[Any], name: str) -> bool:
    """Answer "is this attribute marked?" for a class and attribute name."""
    ann = _own_annotations(cls).get(name)
    return _marked_contract(ann)[0]
