[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlabsh"
version = "0.1.0"
description = "A small interactive shell with built-in file, cipher, calculator and archive commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "repl", "caesar", "calculator", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlabsh = "netlabsh.shell:main"
itungwoi = "netlabsh.calc:main"

[tool.hatch.build.targets.wheel]
packages = ["netlabsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
