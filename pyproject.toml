[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oaikit"
version = "0.1.0"
description = "Typed pydantic models for assistant runs, threads, organization users and realtime WebSocket events, plus file-upload helpers"
requires-python = ">=3.10"
keywords = ["api", "realtime", "websocket", "assistants", "runs", "threads", "pydantic", "models"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Pydantic :: 2",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pydantic>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
]

[tool.hatch.build.targets.wheel]
packages = ["oaikit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
plugins = ["pydantic.mypy"]
