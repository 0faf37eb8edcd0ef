[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spine_anim"
version = "0.1.0"
description = "Read skeletal animation models in the Spine JSON format and compute posed, textured quads for rendering"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "spine",
    "skeletal animation",
    "2d animation",
    "bones",
    "sprites",
    "game development",
]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spine-anim = "spine_anim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["spine_anim"]

[tool.hatch.build.targets.sdist]
include = [
    "spine_anim",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
