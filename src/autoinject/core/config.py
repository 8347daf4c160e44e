"""Configuration table sources: contract identifier -> implementation identifier."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Iterator, Mapping, Protocol, runtime_checkable

from autoinject.core.errors import ConfigurationNotFound, ConfigurationReadError

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE = "properties"

_TRUE = {"1", "true", "yes", "on"}


@runtime_checkable
class ConfigurationSource(Protocol):
    """Anything that can produce the finished table (file, resource, env, network)."""

    def load(self) -> Mapping[str, str]:
        ...


_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}

_SEPARATORS = "=:"


def _logical_lines(text: str) -> Iterator[str]:
    """Drop comments and blank lines; join lines ending in an odd number of backslashes."""
    pending: str | None = None
    for raw in text.splitlines():
        line = raw.lstrip()
        if pending is None and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2:
            pending = (pending or "") + line[:-1]
            continue
        logical = (pending or "") + line
        pending = None
        if logical:
            yield logical
    if pending:
        yield pending


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        c = text[i]
        if c != "\\" or i + 1 == len(text):
            out.append(c)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u":
            digits = text[i + 2:i + 6]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: {text[i:i + 6]!r}")
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _split(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in _SEPARATORS or c.isspace():
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip()
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip()
    return _unescape(key), _unescape(rest).strip()


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse properties text the way java.util.Properties reads it.

    - '#' and '!' start comment lines; blank lines are skipped.
    - The key ends at the first unescaped '=', ':' or whitespace; "key value" works too.
    - A trailing backslash continues the entry on the next line.
    - Backslash escapes (\\t, \\n, \\uXXXX, \\=, ...) are decoded in keys and values.
    - A line with only a key maps it to an empty value.

    Unlike Properties, surrounding whitespace of the value is trimmed.
    Later keys override earlier ones. Malformed \\uXXXX raises ValueError.
    """
    table: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split(line)
        table[key] = value
    return table


class PropertiesFileSource:
    """Table from a properties file on disk."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, str]:
        if not self.path.is_file():
            raise ConfigurationNotFound(str(self.path))
        try:
            table = parse_properties(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigurationReadError(str(self.path), str(e)) from e
        logger.debug("Loaded %d bindings from %s", len(table), self.path)
        return table


class ResourceSource:
    """
    Table from a resource shipped inside a package (default name "properties").
    Package data equivalent of a classpath resource.
    """

    def __init__(self, package: str, name: str = DEFAULT_RESOURCE) -> None:
        self.package = package
        self.name = name

    @property
    def location(self) -> str:
        return f"{self.package}/{self.name}"

    def load(self) -> dict[str, str]:
        try:
            resource = resources.files(self.package).joinpath(self.name)
        except ModuleNotFoundError as e:
            raise ConfigurationNotFound(self.location) from e
        if not resource.is_file():
            raise ConfigurationNotFound(self.location)
        try:
            table = parse_properties(resource.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigurationReadError(self.location, str(e)) from e
        logger.debug("Loaded %d bindings from resource %s", len(table), self.location)
        return table


class MappingSource:
    """Table given directly as a mapping."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = dict(mapping)

    def load(self) -> dict[str, str]:
        return dict(self._mapping)


@dataclass
class Settings:
    """
    Engine settings. Defaults point at the bundled demo resource.
    config_path overrides the resource when set.
    """
    config_path: str | None = None
    resource_package: str = "autoinject.demo"
    resource_name: str = DEFAULT_RESOURCE
    allow_import: bool = False
    log_level: str = "WARNING"

    @classmethod
    def load_from_env(cls, prefix: str = "AUTOINJECT_", **defaults: Any) -> Settings:
        """Build from os.environ with prefix: AUTOINJECT_CONFIG_PATH -> config_path, etc."""
        values: dict[str, Any] = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                values[key[len(prefix):].lower()] = value
        known = {name: values[name] for name in cls.__dataclass_fields__ if name in values}
        if isinstance(known.get("allow_import"), str):
            known["allow_import"] = known["allow_import"].strip().lower() in _TRUE
        if known.get("config_path") == "":
            known["config_path"] = None
        return cls(**known)

    def source(self) -> ConfigurationSource:
        if self.config_path:
            return PropertiesFileSource(self.config_path)
        return ResourceSource(self.resource_package, self.resource_name)
