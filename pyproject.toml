[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flybinds"
version = "1.0"
description = "Terminal menu driven by single key presses: nested submenus, scripts run on selection, and a path filter"
requires-python = ">=3.10"
dependencies = []
keywords = ["menu", "keybindings", "launcher", "hotkeys", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flybinds = "flybinds.cli:main"
stest = "flybinds.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["flybinds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
