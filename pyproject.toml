[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "egoskit"
version = "0.1.0"
description = "Building blocks of a small teaching operating system: queues, C-style string and number routines, a printf buffer, SHA-256, a moving average, a simulated heap allocator, an in-memory file server and a line-stripping tool"
requires-python = ">=3.10"
keywords = [
    "operating-system",
    "teaching",
    "queue",
    "allocator",
    "sha256",
    "printf",
    "ram-filesystem",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
egoskit-cpr = "egoskit.cpr:main"

[tool.hatch.build.targets.wheel]
packages = ["egoskit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
