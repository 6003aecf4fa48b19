[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zena"
version = "0.1.0"
description = "Command-line assistant that sends terminal questions to an AI provider and prints colour-coded answers"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["cli", "assistant", "ai", "terminal", "openai", "gemini"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
zena = "zena.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
