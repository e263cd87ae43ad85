[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nori"
version = "0.1.0"
description = "Core building blocks of a small educational ray tracer: vectors, colors, bounding boxes, frames, discrete distributions, property lists, an object factory, reconstruction filters and an arcball controller."
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "graphics", "sampling", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nori"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
