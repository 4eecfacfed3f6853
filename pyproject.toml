[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "objmesh"
version = "0.1.0"
description = "Wavefront OBJ parser with polygon mesh validation, triangulation and an orbit camera"
requires-python = ">=3.10"
dependencies = []
keywords = ["obj", "wavefront", "mesh", "3d", "parser", "triangulation", "camera"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
objmesh = "objmesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["objmesh"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
