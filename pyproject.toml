[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coworking"
version = "0.1.0"
description = "HTTP service for registering coworking spaces (hotdesks, meeting rooms, offices) with in-memory storage and reservation use cases."
requires-python = ">=3.10"
keywords = ["coworking", "reservations", "hotdesk", "meeting-room", "office", "rest-api", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "flask>=2.2",
    "werkzeug>=2.2",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
coworking = "coworking.main:main"

[tool.hatch.build.targets.wheel]
packages = ["coworking"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
