"""Tests for the implementation registry."""
import pytest

from autoinject import ImplementationRegistry, InstantiationFailure, contract_name
from tests.sample_graph import ArgumentGreeter, EnglishGreeter, ExplodingGreeter, FixedClock


class TestRegistration:
    def test_register_uses_qualified_name(self):
        registry = ImplementationRegistry()
        registry.register(EnglishGreeter)
        assert contract_name(EnglishGreeter) in registry
        assert registry.names() == ["tests.sample_graph.EnglishGreeter"]

    def test_register_as_decorator_with_alias(self):
        registry = ImplementationRegistry()

        @registry.register(name="clock")
        class LocalClock:
            def now(self) -> int:
                return 1

        assert "clock" in registry
        assert isinstance(registry.create("clock"), LocalClock)

    def test_register_returns_class_unchanged(self):
        registry = ImplementationRegistry()
        assert registry.register(FixedClock) is FixedClock

    def test_register_factory(self):
        registry = ImplementationRegistry()
        registry.register_factory("greeter", lambda: ArgumentGreeter("hi"))
        assert registry.create("greeter").greet() == "hi"
        assert len(registry) == 1

    def test_factory_must_be_callable(self):
        with pytest.raises(TypeError):
            ImplementationRegistry().register_factory("x", 42)


class TestCreate:
    def test_each_call_builds_new_instance(self):
        registry = ImplementationRegistry()
        registry.register(EnglishGreeter)
        name = contract_name(EnglishGreeter)
        assert registry.create(name) is not registry.create(name)

    def test_unknown_name(self):
        with pytest.raises(InstantiationFailure) as exc_info:
            ImplementationRegistry().create("no.such.Impl", "field1")
        assert exc_info.value.class_name == "no.such.Impl"
        assert exc_info.value.field == "field1"
        assert "no.such.Impl" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, LookupError)

    def test_constructor_error_is_wrapped(self):
        registry = ImplementationRegistry()
        registry.register(ExplodingGreeter)
        with pytest.raises(InstantiationFailure) as exc_info:
            registry.create(contract_name(ExplodingGreeter))
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "boom" in str(exc_info.value)

    def test_constructor_with_arguments(self):
        registry = ImplementationRegistry()
        registry.register(ArgumentGreeter)
        with pytest.raises(InstantiationFailure) as exc_info:
            registry.create(contract_name(ArgumentGreeter))
        assert isinstance(exc_info.value.__cause__, TypeError)


class TestImportFallback:
    def test_dotted_path(self):
        registry = ImplementationRegistry(allow_import=True)
        assert isinstance(registry.create("tests.sample_graph.FixedClock"), FixedClock)

    def test_colon_path(self):
        registry = ImplementationRegistry(allow_import=True)
        assert isinstance(registry.create("tests.sample_graph:FixedClock"), FixedClock)

    def test_missing_module(self):
        registry = ImplementationRegistry(allow_import=True)
        with pytest.raises(InstantiationFailure) as exc_info:
            registry.create("tests.no_such_module.Thing")
        assert isinstance(exc_info.value.__cause__, ImportError)

    def test_missing_attribute(self):
        registry = ImplementationRegistry(allow_import=True)
        with pytest.raises(InstantiationFailure) as exc_info:
            registry.create("tests.sample_graph.NoSuchClass")
        assert isinstance(exc_info.value.__cause__, AttributeError)

    def test_not_a_dotted_path(self):
        registry = ImplementationRegistry(allow_import=True)
        with pytest.raises(InstantiationFailure):
            registry.create("Bare")

    def test_import_disabled_by_default(self):
        with pytest.raises(InstantiationFailure):
            ImplementationRegistry().create("tests.sample_graph.FixedClock")

    def test_per_call_permission_leaves_flag_alone(self):
        registry = ImplementationRegistry()
        assert isinstance(registry.create("tests.sample_graph.FixedClock", allow_import=True), FixedClock)
        assert registry.allow_import is False
        with pytest.raises(InstantiationFailure):
            registry.create("tests.sample_graph.FixedClock")

    def test_per_call_refusal_overrides_flag(self):
        registry = ImplementationRegistry(allow_import=True)
        with pytest.raises(InstantiationFailure):
            registry.create("tests.sample_graph.FixedClock", allow_import=False)
