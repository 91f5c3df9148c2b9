[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thzimage"
version = "1.0.0"
description = "Pixel types, colour-space conversion, a test image generator, convolution transformers and numbered image series writing"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "pixel", "hsv", "colorspace", "convolution"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["thzimage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
