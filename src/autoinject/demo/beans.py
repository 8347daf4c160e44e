"""SomeBean — object with two injectable attributes."""
from __future__ import annotations

from autoinject.core.marker import Inject
from autoinject.demo.contracts import SomeInterface, SomeOtherInterface


class SomeBean:
    """
    Both attributes are None until Injector.inject(bean).
    foo() reports missing dependencies instead of failing.
    """

    _field1: Inject[SomeInterface] = None
    _field2: Inject[SomeOtherInterface] = None

    def foo(self) -> None:
        if self._field1 is not None:
            self._field1.do_something()
        else:
            print("field1 is null!")

        if self._field2 is not None:
            self._field2.do_some_other()
        else:
            print("field2 is null!")

    @property
    def field1(self) -> SomeInterface | None:
        return self._field1

    @property
    def field2(self) -> SomeOtherInterface | None:
        return self._field2
