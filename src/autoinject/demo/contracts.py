"""Demo contracts: one abstract class, one runtime-checkable protocol."""
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


class SomeInterface(ABC):
    """Some action. SomeImpl prints "A", OtherImpl prints "B"."""

    @abstractmethod
    def do_something(self) -> None:
        ...


@runtime_checkable
class SomeOtherInterface(Protocol):
    """Another action. SODoer prints "C"."""

    def do_some_other(self) -> None:
        ...
