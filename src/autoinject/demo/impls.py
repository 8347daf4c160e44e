"""Demo implementations, registered by identifier in the demo registry."""
from autoinject.core.registry import ImplementationRegistry
from autoinject.demo.contracts import SomeInterface

registry = ImplementationRegistry()


@registry.register
class SomeImpl(SomeInterface):
    """Default SomeInterface binding."""

    def do_something(self) -> None:
        print("A")


@registry.register
class OtherImpl(SomeInterface):
    """Alternative SomeInterface binding: switch to it in the properties file."""

    def do_something(self) -> None:
        print("B")


@registry.register
class SODoer:
    # Satisfies SomeOtherInterface structurally.
    def do_some_other(self) -> None:
        print("C")
