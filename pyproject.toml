[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moteur"
version = "0.1.0"
description = "A small scene engine: game objects, components, transforms, meshes and a recording render device"
requires-python = ">=3.10"
keywords = ["3d", "engine", "scene", "transform", "quaternion", "mesh"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = ["numpy"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
moteur = "moteur.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["moteur"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
