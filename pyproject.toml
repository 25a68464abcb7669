[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordtrainer"
version = "0.1.0"
description = "A terminal vocabulary trainer that drills words, tracks progress and archives learned phrases."
requires-python = ">=3.10"
dependencies = []
keywords = ["vocabulary", "flashcards", "language learning", "trainer", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordtrainer = "wordtrainer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordtrainer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
