[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actionplot"
version = "0.1.0"
description = "Turn simulation action timeline CSV logs into plot points: actions, errors, missed actions, stages and CPR periods."
requires-python = ">=3.10"
keywords = ["csv", "timeline", "simulation", "resuscitation", "plotting", "dashboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Healthcare Industry",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Typing :: Typed",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
actionplot = "actionplot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["actionplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
