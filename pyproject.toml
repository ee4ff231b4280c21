[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hatescene"
version = "0.1.0"
description = "Scene graph, meshes, lights, camera, level-of-detail models, mesh animation and collision shapes for small 3D games"
requires-python = ">=3.10"
keywords = ["game", "scene graph", "3d", "mesh", "camera", "collision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hatescene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
