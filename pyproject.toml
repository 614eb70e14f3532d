[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regcomms"
version = "0.1.0"
description = "Register access over embedded comms and a code generator for peripheral register crates"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["embedded", "registers", "i2c", "code-generation", "peripheral"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
regcommsgen = "regcomms.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["regcomms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
