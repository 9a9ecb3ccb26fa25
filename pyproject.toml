[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noisekit"
version = "0.1.0"
description = "Pure-Python coherent noise functions (OpenSimplex2S, Perlin, value, cubic value, domain warp offsets) plus a small wall-clock timer"
requires-python = ">=3.10"
dependencies = []
keywords = ["noise", "opensimplex", "perlin", "value-noise", "procedural", "domain-warp", "terrain"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["noisekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
