[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catalogo"
version = "0.1.0"
description = "Product catalogue: in-memory and SQL repositories, a JSON HTTP API and small console demos"
requires-python = ">=3.10"
keywords = ["catalogue", "products", "crud", "rest", "flask", "sqlalchemy", "repository"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "flask>=2.2",
    "sqlalchemy>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
catalogo-api = "catalogo.api:main"
catalogo-demo = "catalogo.demo:main"
catalogo-workerpool = "catalogo.workerpool:main"

[tool.hatch.build.targets.wheel]
packages = ["catalogo"]

[tool.hatch.build.targets.sdist]
include = ["catalogo", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
