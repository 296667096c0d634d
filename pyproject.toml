[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stuman"
version = "0.1.0"
description = "Student records, payments, weekly schedules, an honour wall of pictures and user passwords kept in one SQLite database"
requires-python = ">=3.10"
keywords = ["students", "school", "tutoring", "schedule", "payments", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database",
    "Topic :: Education",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stuman = "stuman.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stuman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
