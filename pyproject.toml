[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aktext"
version = "0.1.0"
description = "String utilities, format-specification parsing and rendering primitives, a generic lexer and numeral helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "formatting", "lexer", "text", "glob", "roman numerals"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aktext"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
