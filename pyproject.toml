[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumentrace"
version = "0.1.0"
description = "Geometry, acceleration structures, textures and tile rendering helpers for a path tracer"
requires-python = ">=3.10"
keywords = ["raytracing", "path-tracing", "bvh", "rendering", "graphics", "perlin"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lumentrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
