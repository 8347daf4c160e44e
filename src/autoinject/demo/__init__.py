"""Demo object graph: contracts, implementations, SomeBean and the bundled properties resource."""
from autoinject.demo.beans import SomeBean
from autoinject.demo.contracts import SomeInterface, SomeOtherInterface
from autoinject.demo.impls import OtherImpl, SODoer, SomeImpl, registry

__all__ = [
    "SomeBean",
    "SomeInterface",
    "SomeOtherInterface",
    "SomeImpl",
    "OtherImpl",
    "SODoer",
    "registry",
]
