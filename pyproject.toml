[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carmanager"
version = "1.0.0"
description = "A small desktop inventory manager for cars, with role-based login and a plain-text store"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "cars", "tkinter", "desktop", "dealership"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carmanager = "carmanager.app:main"

[tool.hatch.build.targets.wheel]
packages = ["carmanager"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
