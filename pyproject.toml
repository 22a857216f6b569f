[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcmodules"
version = "0.10.0"
description = "Ready-made container image definitions for integration tests: databases, brokers, emulators and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["docker", "containers", "testing", "integration-tests", "fixtures"]
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
    "Topic :: Software Development :: Testing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tcmodules"]

[tool.hatch.build.targets.sdist]
include = ["tcmodules", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
