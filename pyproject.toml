[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tplrt"
version = "0.1.0"
description = "Runtime support for Jinja-like templates: template base class, filters, errors and HTTP responses"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["template", "jinja", "filters", "html", "rendering"]
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
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tplrt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
