[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csnet"
version = "0.1.0"
description = "SCION ISD-AS identifiers, path fields, path segments, path collections and topology bootstrapping"
requires-python = ">=3.10"
dependencies = [
    "dnspython",
]
keywords = ["scion", "networking", "isd-as", "hop-field", "info-field", "path", "bootstrap", "topology"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["csnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
