[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pkgtypes"
version = "0.1.0"
description = "Typed reading and writing of package.json manifests."
requires-python = ">=3.10"
keywords = ["package.json", "npm", "manifest", "json"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pkgtypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
