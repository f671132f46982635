[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ari"
version = "0.1.0"
description = "Small utilities: hashing, formatting, file system helpers, padding, reset events, stopwatches and more."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["utilities", "siphash", "hex", "bitfield", "stopwatch", "reset-event", "filesystem", "utf-16"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ari"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
