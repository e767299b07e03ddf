[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "learnbits"
version = "0.1.0"
description = "Small teaching programs: an Eliza chat, investment and profit calculators, a number trick and a scope demo."
requires-python = ">=3.10"
dependencies = []
keywords = ["eliza", "calculator", "education", "examples", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
learnbits-eliza = "learnbits.eliza:main"
learnbits-investment = "learnbits.investment:main"
learnbits-profit = "learnbits.profit:main"
learnbits-guess = "learnbits.guessing:main"
learnbits-scope = "learnbits.scope:main"

[tool.hatch.build.targets.wheel]
packages = ["learnbits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
