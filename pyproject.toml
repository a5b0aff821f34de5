[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rockide"
version = "0.1.0"
description = "Building blocks for a Minecraft Bedrock add-on language server: positions, file URIs, text documents, semantic tokens, project discovery and vanilla world data."
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "bedrock", "add-on", "language-server", "lsp"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rockide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
