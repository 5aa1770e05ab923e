[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textarea_core"
version = "0.7.0"
description = "Terminal-independent building blocks for a multi-line text editor widget: line highlighting, undo history, regex search, key input and scrolling."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["tui", "textarea", "editor", "highlight", "undo", "terminal"]
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
    "Environment :: Console",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["textarea_core"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
