[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marsrover"
version = "1.0.0"
description = "Mars rover mission control: plateau, rovers and commands behind a small JSON HTTP API"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["mars-rover", "rover", "http", "json-api", "wsgi", "hexagonal-architecture"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mars-rover-http = "marsrover.cli:main"
mars-rover-cli = "marsrover.cli:hello"

[tool.hatch.build.targets.wheel]
packages = ["marsrover"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
