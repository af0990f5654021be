[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pfdsp"
version = "0.1.0"
description = "Pure-Python mixed-radix FFTs, cosine/sine transforms and a CIC digital down-converter"
requires-python = ">=3.10"
dependencies = []
keywords = ["fft", "dsp", "fourier", "cosine transform", "sine transform", "cic", "decimation", "sdr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pfdsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
