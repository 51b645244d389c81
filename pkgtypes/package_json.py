"""The package.json document model with reading and writing."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Union

from pkgtypes.fields import (
    BinValue,
    Bugs,
    ExportsValue,
    FieldError,
    ManValue,
    ModuleType,
    Person,
    Repository,
    _string,
    _string_list,
    _string_map,
    parse_bin,
    parse_exports,
    parse_man,
)

PACKAGE_JSON = "package.json"


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise FieldError(f"expected a boolean, got {type(value).__name__}")
    return value


def _module_type(value: Any) -> ModuleType:
    try:
        return ModuleType(_string(value))
    except ValueError as err:
        raise FieldError(f"unknown variant {value!r}, expected 'module' or 'commonjs'") from err


def _people(value: Any) -> list[Person]:
    if not isinstance(value, list):
        raise FieldError("expected an array of people")
    return [Person.from_json(item) for item in value]


def _to_json(value: Any) -> Any:
    return value.to_json()


@dataclass(frozen=True)
class _Field:
    attr: str
    key: str
    parse: Callable[[Any], Any]
    dump: Callable[[Any], Any] = copy.deepcopy
    nullable: bool = True


_FIELDS = (
    _Field("name", "name", _string),
    _Field("version", "version", _string),
    _Field("description", "description", _string),
    _Field("keywords", "keywords", _string_list),
    _Field("homepage", "homepage", _string),
    _Field("bugs", "bugs", Bugs.from_json, _to_json),
    _Field("license", "license", _string),
    _Field("repository", "repository", Repository.from_json, _to_json),
    _Field("scripts", "scripts", _string_map),
    _Field("private", "private", _boolean),
    _Field("author", "author", Person.from_json, _to_json),
    _Field("contributors", "contributors", _people, lambda people: [p.to_json() for p in people]),
    _Field("files", "files", _string_list),
    _Field("main", "main", _string),
    _Field("browser", "browser", _string),
    _Field("bin", "bin", parse_bin),
    _Field("man", "man", parse_man),
    _Field("dependencies", "dependencies", _string_map),
    _Field("dev_dependencies", "devDependencies", _string_map),
    _Field("optional_dependencies", "optionalDependencies", _string_map),
    _Field("peer_dependencies", "peerDependencies", _string_map),
    _Field("types", "types", _string),
    _Field("typings", "typings", _string),
    _Field("module", "module", _string),
    _Field("type_", "type", _module_type, lambda kind: kind.value, nullable=False),
    _Field("exports", "exports", parse_exports),
    _Field("workspaces", "workspaces", _string_list),
)


@dataclass
class PackageJson:
    """The fields of a package.json file; absent fields are None."""

    name: str | None = None
    version: str | None = None
    description: str | None = None
    keywords: list[str] | None = None
    homepage: str | None = None
    bugs: Bugs | None = None
    license: str | None = None
    repository: Repository | None = None
    scripts: dict[str, str] | None = None
    private: bool | None = None
    author: Person | None = None
    contributors: list[Person] | None = None
    files: list[str] | None = None
    main: str | None = None
    browser: str | None = None
    bin: BinValue | None = None
    man: ManValue | None = None
    dependencies: dict[str, str] | None = None
    dev_dependencies: dict[str, str] | None = None
    optional_dependencies: dict[str, str] | None = None
    peer_dependencies: dict[str, str] | None = None
    types: str | None = None
    typings: str | None = None
    module: str | None = None
    type_: ModuleType = field(default=ModuleType.COMMONJS)
    exports: ExportsValue | None = None
    workspaces: list[str] | None = None

    @staticmethod
    def from_dict(data: Any) -> PackageJson:
        """Build from decoded JSON; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise FieldError("package.json must hold a JSON object")
        values: dict[str, Any] = {}
        for spec in _FIELDS:
            if spec.key not in data:
                continue
            raw = data[spec.key]
            if raw is None and spec.nullable:
                continue
            try:
                values[spec.attr] = spec.parse(raw)
            except FieldError as err:
                raise FieldError(f"{spec.key}: {err}") from err
        return PackageJson(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object, leaving out fields that are not set."""
        result: dict[str, Any] = {}
        for spec in _FIELDS:
            value = getattr(self, spec.attr)
            if value is not None:
                result[spec.key] = spec.dump(value)
        return result

    @staticmethod
    def from_path(path: Union[str, PathLike]) -> PackageJson:
        with open(path, encoding="utf-8") as stream:
            data = json.load(stream)
        return PackageJson.from_dict(data)

    @staticmethod
    def read_package_json() -> PackageJson:
        """Read package.json from the current working directory."""
        return PackageJson.from_path(Path.cwd() / PACKAGE_JSON)

    def write(self) -> None:
        """Write compact JSON to package.json in the current working directory."""
        text = json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
        Path(PACKAGE_JSON).write_text(text, encoding="utf-8")