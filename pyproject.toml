[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marcduino"
version = "0.1.0"
description = "Dome panel servo sequences, a bounded byte FIFO and small bit and pin helpers for Marcduino-style controllers"
requires-python = ">=3.10"
keywords = ["marcduino", "servo", "sequence", "fifo", "ring buffer", "dome panels", "astromech"]
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
    "Topic :: Software Development :: Embedded Systems",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marcduino"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
