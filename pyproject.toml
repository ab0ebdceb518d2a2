[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgmcomponents"
version = "0.1.0"
description = "Extract, filter and write 4-connected components of binary PGM (P5) images"
requires-python = ">=3.10"
dependencies = []
keywords = ["pgm", "image", "connected-components", "flood-fill", "segmentation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pgmcomponents = "pgmcomponents.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pgmcomponents"]

[tool.pytest.ini_options]
addopts = "-ra"
