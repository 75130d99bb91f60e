[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordcheck"
version = "0.1.0"
description = "A small spell-checker that reports the misspelled words of a text against a word list"
requires-python = ">=3.10"
dependencies = []
keywords = ["spell-checker", "spelling", "dictionary", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordcheck = "wordcheck.speller:main"

[tool.hatch.build.targets.wheel]
packages = ["wordcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
