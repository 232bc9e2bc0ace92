[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfsolve"
version = "0.1.0"
description = "Solutions to a set of competitive programming problems, usable as functions or as stdin/stdout commands."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "contest", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
cfsolve-round960 = "cfsolve.round960:main"
cfsolve-round961 = "cfsolve.round961:main"
cfsolve-round963 = "cfsolve.round963:main"
cfsolve-round965 = "cfsolve.round965:main"
cfsolve-round969 = "cfsolve.round969:main"
cfsolve-round973 = "cfsolve.round973:main"
cfsolve-round975 = "cfsolve.round975:main"

[tool.hatch.build.targets.wheel]
packages = ["cfsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
