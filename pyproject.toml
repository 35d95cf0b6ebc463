[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volpefw"
version = "0.1.0"
description = "Camera, grid, sphere and sample-runner helpers for small 3D rendering samples, plus a tiny JSON reader and writer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "camera", "frustum", "grid", "sphere", "graphics", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["volpefw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
