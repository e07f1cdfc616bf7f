[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inspectable"
version = "0.1.0"
description = "Visitor-based value inspection: describe structs, enums and lists, then walk them with visitors."
requires-python = ">=3.10"
dependencies = []
keywords = ["inspection", "visitor", "reflection", "structured-data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inspectable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
