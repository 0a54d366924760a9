[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isofields"
version = "0.1.0"
description = "Length prefixers, padders, tag sorting and network length headers for ISO 8583 style message fields"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "iso8583",
    "payments",
    "bcd",
    "ebcdic",
    "ber-tlv",
    "length-prefix",
    "padding",
    "binary-protocol",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["isofields"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
