[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "llmterm"
version = "0.1.0"
description = "Generate terminal commands from plain-language prompts using OpenAI or local Ollama models"
requires-python = ">=3.10"
keywords = ["llm", "openai", "ollama", "shell", "terminal", "cli"]
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
dependencies = [
    "requests>=2.28",
    "termcolor>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
llm-term = "llmterm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["llmterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
