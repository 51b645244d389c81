import pytest

from pkgtypes.fields import (
    Bugs,
    FieldError,
    ModuleType,
    Person,
    Repository,
    parse_bin,
    parse_exports,
    parse_man,
)


def test_module_type_values():
    assert ModuleType("module") is ModuleType.MODULE
    assert ModuleType("commonjs") is ModuleType.COMMONJS


def test_module_type_rejects_unknown():
    with pytest.raises(ValueError):
        ModuleType("esm")


def test_bugs_string_round_trip():
    bugs = Bugs.from_json("https://issues.example.com")
    assert bugs.text == "https://issues.example.com"
    assert bugs.to_json() == "https://issues.example.com"


def test_bugs_object_round_trip():
    raw = {"url": "https://issues.example.com", "email": "bugs@example.com"}
    bugs = Bugs.from_json(raw)
    assert bugs.url == raw["url"]
    assert bugs.email == raw["email"]
    assert bugs.to_json() == raw


def test_bugs_object_needs_both_fields():
    with pytest.raises(FieldError):
        Bugs.from_json({"url": "https://issues.example.com"})


def test_bugs_rejects_number():
    with pytest.raises(FieldError):
        Bugs.from_json(42)


def test_repository_object_round_trip():
    raw = {"type_": "git", "url": "https://git.example.com/repo", "directory": "pkg"}
    repo = Repository.from_json(raw)
    assert repo.type_ == "git"
    assert repo.directory == "pkg"
    assert repo.to_json() == raw


def test_repository_directory_optional():
    repo = Repository.from_json({"type_": "git", "url": "https://git.example.com/repo"})
    assert repo.directory is None
    assert repo.to_json()["directory"] is None


def test_repository_missing_url_fails():
    with pytest.raises(FieldError):
        Repository.from_json({"type_": "git"})


def test_person_string_and_object():
    assert Person.from_json("Jane Doe").to_json() == "Jane Doe"
    person = Person.from_json({"name": "Jane Doe", "email": "jane@example.com"})
    assert person.to_json() == {"name": "Jane Doe", "email": "jane@example.com", "url": None}


def test_person_needs_name():
    with pytest.raises(FieldError):
        Person.from_json({"email": "jane@example.com"})


def test_person_direct_construction_requires_name():
    with pytest.raises(FieldError):
        Person(email="jane@example.com")


def test_parse_bin_forms():
    assert parse_bin("./cli.js") == "./cli.js"
    assert parse_bin({"tool": "./cli.js"}) == {"tool": "./cli.js"}
    with pytest.raises(FieldError):
        parse_bin({"tool": 1})
    with pytest.raises(FieldError):
        parse_bin(["./cli.js"])


def test_parse_man_forms():
    assert parse_man("./man/doc.1") == "./man/doc.1"
    assert parse_man(["a.1", "b.1"]) == ["a.1", "b.1"]
    with pytest.raises(FieldError):
        parse_man(["a.1", 2])


def test_parse_exports_forms():
    assert parse_exports("./index.js") == "./index.js"
    raw = {
        ".": {"import": "./index.mjs", "require": "./index.cjs"},
        "./extra": "./extra.js",
    }
    assert parse_exports(raw) == raw


def test_parse_exports_rejects_nested_list():
    with pytest.raises(FieldError):
        parse_exports({".": ["./index.js"]})