# pkgtypes

Typed access to `package.json` manifests.

`pkgtypes` reads a `package.json` file into a `PackageJson` dataclass. It gives typed values to structured fields such as `bugs`, `repository`, `author`, `bin`, `man` and `exports`. It can write the object back as JSON. The package has no dependencies outside the standard library.

## Installation

```
pip install pkgtypes
```

## Reading a manifest

```python
from pkgtypes.package_json import PackageJson

pkg = PackageJson.from_path("path/to/package.json")
print(pkg.name, pkg.version)

# Reads ./package.json from the current working directory
pkg = PackageJson.read_package_json()
```

Errors from `from_path`:

- A missing or unreadable file raises `OSError`.
- A file that is not valid JSON raises `json.JSONDecodeError`, which is a `ValueError`.
- A field whose value has the wrong shape raises `pkgtypes.fields.FieldError`, which is also a `ValueError`. The message names the offending key.

Keys that the model does not know are ignored. A `null` value counts as an absent field, with one exception: `type` must be `"module"` or `"commonjs"`.

## Fields

Every attribute of `PackageJson` defaults to `None`, except `type_`, which defaults to `ModuleType.COMMONJS`. Attribute names use snake case. The JSON keys they map to are:

| Attribute | JSON key |
| --- | --- |
| `dev_dependencies` | `devDependencies` |
| `optional_dependencies` | `optionalDependencies` |
| `peer_dependencies` | `peerDependencies` |
| `type_` | `type` |

The other attributes have the same name as their JSON key: `name`, `version`, `description`, `keywords`, `homepage`, `bugs`, `license`, `repository`, `scripts`, `private`, `author`, `contributors`, `files`, `main`, `browser`, `bin`, `man`, `dependencies`, `types`, `typings`, `module`, `exports` and `workspaces`.

## Working with dictionaries

```python
pkg = PackageJson.from_dict({"name": "pkg-name", "type": "module"})
data = pkg.to_dict()
# {'name': 'pkg-name', 'type': 'module'}
```

`to_dict` leaves out every field that is `None`. It always writes `type`.

## Writing

```python
pkg = PackageJson(name="pkg-name")
pkg.write()  # writes ./package.json as compact UTF-8 JSON
```

`write` always writes to `package.json` in the current working directory and replaces any file already there.

## Field helpers

The module `pkgtypes.fields` provides the following:

- `ModuleType`: a string enum for the `type` field, with the members `MODULE` (`"module"`) and `COMMONJS` (`"commonjs"`).
- `Bugs`: accepts either a string or an object with both `url` and `email`.
- `Repository`: accepts either a string or an object with `type_`, `url` and an optional `directory`. The object form uses the key `type_`, not `type`.
- `Person`: accepts either a string or an object with `name` and an optional `email` and `url`.
- `parse_bin`: checks a string or an object of strings.
- `parse_man`: checks a string or an array of strings.
- `parse_exports`: checks a string, or an object whose values are strings or objects of strings.
- `FieldError`: raised by all of the above when a value has the wrong shape.

`Bugs`, `Repository` and `Person` are frozen dataclasses. Each has a static `from_json` method and a `to_json` method. A string value is kept in the `text` attribute and written back as that string:

```python
from pkgtypes.fields import Person

Person.from_json("Jane <jane@example.com>").text
Person.from_json({"name": "Jane", "email": "jane@example.com"}).to_json()
# {'name': 'Jane', 'email': 'jane@example.com', 'url': None}
```

## What it does not do

- It has no command-line tool. It is a library only.
- It does not check npm's rules for package names or version strings.
- It does not model `tsconfig.json`.
- It keeps no key order from the input and no unknown keys. Writing a manifest that was read in produces only the modelled fields.

## Running the tests

```
pip install -e .[test]
pytest
```