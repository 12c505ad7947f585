[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grindstone"
version = "0.1.0"
description = "Install and update Minecraft game files: version data, Java runtime, libraries, assets, log config and client jar."
requires-python = ">=3.11"
keywords = ["minecraft", "updater", "installer", "java-runtime", "assets", "libraries"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
grindstone = "grindstone.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grindstone"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
