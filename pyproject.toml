[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heron"
version = "0.1.0"
description = "Physics components and resources: collision layers, shapes, velocities, step control and debug wireframes"
requires-python = ">=3.10"
dependencies = [
    "scipy",
]
keywords = ["physics", "collision", "rigid-body", "game", "simulation", "wireframe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["heron"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
