[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textstats"
version = "0.1.0"
description = "Character-class statistics for text: words, lines, paragraphs, vowels, consonants and more, with a small HTTP endpoint."
requires-python = ">=3.10"
keywords = ["text", "statistics", "word count", "character classes", "analysis"]
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
    "Framework :: Flask",
    "Topic :: Text Processing :: General",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
textstats-server = "textstats.server:main"

[tool.hatch.build.targets.wheel]
packages = ["textstats"]

[tool.pytest.ini_options]
addopts = "-ra"
