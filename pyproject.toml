[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wcparser"
version = "0.1.1"
description = "Parse WhatsApp chat exports into structured messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["whatsapp", "chat", "export", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Text Processing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wcparser = "wcparser.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wcparser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
