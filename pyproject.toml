[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elfcrafter"
version = "0.1.0"
description = "Read 32-bit little-endian ELF files and print their headers as an indented tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["elf", "elf32", "binary", "object file", "section header", "inspection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
elfcrafter = "elfcrafter.elf:main"

[tool.hatch.build.targets.wheel]
packages = ["elfcrafter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
