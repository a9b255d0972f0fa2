[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgnodes"
version = "0.1.0"
description = "Node-based image processing: build a graph of image filters and run it."
requires-python = ">=3.10"
keywords = ["image", "processing", "node graph", "filters", "pipeline"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["imgnodes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
