[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediadebug"
version = "0.1.0"
description = "Helpers for inspecting media probe output: codec flags, help tables, frame tables, JSON trees and export commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["ffprobe", "media", "codec", "json", "frames", "inspection"]
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
    "Topic :: Multimedia :: Video",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mediadebug"]

[tool.pytest.ini_options]
addopts = "-ra"
