[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "synopsia"
version = "1.0.0"
description = "Binary analysis building blocks: Jensen-Shannon entropy scoring, colour gradients, a minimap model, function lists and a feature registry"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary analysis", "entropy", "reverse engineering", "minimap", "visualization"]
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
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["synopsia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
