[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kshbank"
version = "0.1.0"
description = "User registration and login backed by a CSV file, current and saving accounts in Ksh, and a small console app."
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "savings", "csv", "registration", "login", "ksh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kshbank = "kshbank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kshbank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
