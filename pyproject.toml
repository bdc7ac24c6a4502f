[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kirogate"
version = "0.1.0"
description = "Convert OpenAI and Anthropic chat requests into Kiro API conversation payloads"
requires-python = ">=3.10"
dependencies = []
keywords = ["kiro", "openai", "anthropic", "gateway", "proxy", "llm", "converter"]
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
    "Topic :: Internet :: Proxy Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kirogate"]

[tool.pytest.ini_options]
addopts = "-ra"
