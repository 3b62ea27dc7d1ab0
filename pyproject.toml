[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdfview"
version = "0.1.0"
description = "Isometric wireframe viewer for height-map files"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "heightmap", "isometric", "fdf", "xpm", "rasterizer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fdfview = "fdfview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fdfview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
