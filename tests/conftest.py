import pytest

from autoinject import Injector, MappingSource
from tests.sample_graph import BINDINGS, make_registry


@pytest.fixture
def registry():
    return make_registry()


@pytest.fixture
def injector(registry):
    return Injector(MappingSource(BINDINGS), registry)


@pytest.fixture
def write_properties(tmp_path):
    """Write a properties file and return its path."""

    def _write(bindings, name="properties"):
        path = tmp_path / name
        path.write_text("".join(f"{k}={v}\n" for k, v in bindings.items()), encoding="utf-8")
        return path

    return _write
