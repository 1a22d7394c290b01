[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "korelite"
version = "0.1.0"
description = "Small building blocks for web applications: in-memory sessions with one-time CSRF tokens, HTML escaping, simple templates with inheritance and guarded SQL helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["web", "session", "csrf", "template", "sql", "html-escaping", "db-api"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["korelite"]

[tool.pytest.ini_options]
addopts = "-ra"
