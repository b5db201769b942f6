[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbench"
version = "0.1.0"
description = "Small systems experiments: a callback-based logger, asynchronous reads, concurrent appends, byte-order checks, struct layout and project scaffolding"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "logging",
    "asynchronous-io",
    "atomic-append",
    "endianness",
    "struct-layout",
    "scaffolding",
    "cmake",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cbench-aio-basic = "cbench.aio_basic:main"
cbench-atomic-write = "cbench.atomic_write:main"
cbench-endianness = "cbench.endianness:main"
cbench-anonymous-struct = "cbench.anonymous_struct:main"
cbench-init-project = "cbench.init_project:main"

[tool.hatch.build.targets.wheel]
packages = ["cbench"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
