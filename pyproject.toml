[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockmenu"
version = "1.0.0"
description = "A block-world title screen, loading screen and side-scrolling terrain view built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "title-screen", "menu", "loading-screen", "blocks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blockmenu = "blockmenu.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blockmenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
