[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuelflux"
version = "0.1.0"
description = "Pump controller client for the FuelFlux API with a local SQLite cache and an offline request queue"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["fuel", "pump", "controller", "client", "offline", "cache", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
fuelflux-example = "fuelflux.example:main"

[tool.hatch.build.targets.wheel]
packages = ["fuelflux"]

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
