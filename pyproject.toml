[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitgl"
version = "1.0.0"
description = "Small 3D maths and scene toolkit: vectors, 4x4 matrices, meshes, cameras and per-vertex lighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "graphics", "matrix", "vector", "mesh", "camera", "lighting"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orbitgl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
