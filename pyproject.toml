[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greeter"
version = "1.0.0"
description = "Say hello in English, German, Spanish and French."
requires-python = ">=3.10"
dependencies = []
keywords = ["greeting", "hello", "localization", "cli"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
greeter = "greeter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["greeter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
