[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "agentsim"
version = "0.1.0"
description = "A small grid world where agents wander, eat, breed and mutate, shown live in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "agents", "artificial life", "evolution", "grid", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
agentsim = "agentsim.cli:main"

[tool.setuptools]
packages = ["agentsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
