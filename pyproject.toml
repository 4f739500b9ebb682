[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crudempresa"
version = "0.1.0"
description = "Desktop CRUD for employees, departments, department heads and projects, stored as JSON with text mirrors"
requires-python = ">=3.10"
dependencies = []
keywords = ["crud", "employees", "departments", "projects", "json", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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
crudempresa = "crudempresa.app:main"

[tool.hatch.build.targets.wheel]
packages = ["crudempresa"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
