[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doxybook"
version = "0.1.0"
description = "Read Doxygen XML descriptions, print them as plain text or Markdown, and render pages from Jinja2 templates"
requires-python = ">=3.10"
dependencies = [
    "lxml",
    "jinja2",
]
keywords = ["doxygen", "markdown", "documentation", "xml", "templates"]
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
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["doxybook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
