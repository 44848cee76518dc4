[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labtasks"
version = "0.1.0"
description = "Average identifier length and polynomial derivative calculators, with random input generators and self-check runners"
requires-python = ">=3.10"
dependencies = []
keywords = ["identifiers", "polynomial", "derivative", "test data", "generator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labtasks-generate = "labtasks.generator:main"
labtasks-check-identifiers = "labtasks.identifier_check:main"
labtasks-check-polynomial = "labtasks.polynomial_check:main"

[tool.hatch.build.targets.wheel]
packages = ["labtasks"]

[tool.pytest.ini_options]
addopts = "-ra"
