"""Value types for the structured fields of a package.json document."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

BinValue = Union[str, dict[str, str]]
ManValue = Union[str, list[str]]
ExportsValue = Union[str, dict[str, Union[str, dict[str, str]]]]


class FieldError(ValueError):
    """Raised when a package.json value does not have an accepted shape."""


class ModuleType(str, enum.Enum):
    """How Node.js loads the package's main entry point."""

    MODULE = "module"
    COMMONJS = "commonjs"


def _string(value: Any, what: str = "value") -> str:
    if not isinstance(value, str):
        raise FieldError(f"{what}: expected a string, got {type(value).__name__}")
    return value


def _required_string(mapping: Mapping, key: str, what: str) -> str:
    value = mapping.get(key)
    if value is None:
        raise FieldError(f"{what}: missing field {key!r}")
    return _string(value, f"{what}.{key}")


def _optional_string(mapping: Mapping, key: str, what: str) -> str | None:
    value = mapping.get(key)
    return None if value is None else _string(value, f"{what}.{key}")


def _string_list(value: Any, what: str = "value") -> list[str]:
    if not isinstance(value, list):
        raise FieldError(f"{what}: expected an array of strings")
    return [_string(item, f"{what}[]") for item in value]


def _string_map(value: Any, what: str = "value") -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise FieldError(f"{what}: expected an object of strings")
    return {
        _string(key, f"{what} key"): _string(item, f"{what}.{key}")
        for key, item in value.items()
    }


@dataclass(frozen=True)
class Bugs:
    """Issue tracker: a single string, or a url together with an email."""

    url: str | None = None
    email: str | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if self.text is None and (self.url is None or self.email is None):
            raise FieldError("bugs: needs a text value or both url and email")

    @staticmethod
    def from_json(value: Any) -> Bugs:
        if isinstance(value, str):
            return Bugs(text=value)
        if isinstance(value, Mapping):
            return Bugs(
                url=_required_string(value, "url", "bugs"),
                email=_required_string(value, "email", "bugs"),
            )
        raise FieldError("bugs: data did not match a string or an object")

    def to_json(self) -> str | dict[str, Any]:
        if self.text is not None:
            return self.text
        return {"url": self.url, "email": self.email}


@dataclass(frozen=True)
class Repository:
    """Where the code lives: a shortcut string, or a type, url and directory."""

    type_: str | None = None
    url: str | None = None
    directory: str | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if self.text is None and (self.type_ is None or self.url is None):
            raise FieldError("repository: needs a text value or both type_ and url")

    @staticmethod
    def from_json(value: Any) -> Repository:
        if isinstance(value, str):
            return Repository(text=value)
        if isinstance(value, Mapping):
            return Repository(
                type_=_required_string(value, "type_", "repository"),
                url=_required_string(value, "url", "repository"),
                directory=_optional_string(value, "directory", "repository"),
            )
        raise FieldError("repository: data did not match a string or an object")

    def to_json(self) -> str | dict[str, Any]:
        if self.text is not None:
            return self.text
        return {"type_": self.type_, "url": self.url, "directory": self.directory}


@dataclass(frozen=True)
class Person:
    """A person: a single string, or a name with an optional email and url."""

    name: str | None = None
    email: str | None = None
    url: str | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if self.text is None and self.name is None:
            raise FieldError("person: needs a text value or a name")

    @staticmethod
    def from_json(value: Any) -> Person:
        if isinstance(value, str):
            return Person(text=value)
        if isinstance(value, Mapping):
            return Person(
                name=_required_string(value, "name", "person"),
                email=_optional_string(value, "email", "person"),
                url=_optional_string(value, "url", "person"),
            )
        raise FieldError("person: data did not match a string or an object")

    def to_json(self) -> str | dict[str, Any]:
        if self.text is not None:
            return self.text
        return {"name": self.name, "email": self.email, "url": self.url}


def parse_bin(value: Any) -> BinValue:
    """Accept a single command path or a map of command names to paths."""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return _string_map(value, "bin")
    raise FieldError("bin: data did not match a string or an object")


def parse_man(value: Any) -> ManValue:
    """Accept a single man page file or a list of them."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return _string_list(value, "man")
    raise FieldError("man: data did not match a string or an array")


def parse_exports(value: Any) -> ExportsValue:
    """Accept a single export path or a map of conditions to paths or sub-maps."""
    if isinstance(value, str):
        return value
    if not isinstance(value, Mapping):
        raise FieldError("exports: data did not match a string or an object")
    record: dict[str, str | dict[str, str]] = {}
    for key, item in value.items():
        key = _string(key, "exports key")
        if isinstance(item, str):
            record[key] = item
        elif isinstance(item, Mapping):
            record[key] = _string_map(item, f"exports.{key}")
        else:
            raise FieldError(f"exports.{key}: expected a string or an object")
    return record