[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bwkit"
version = "0.9.0"
description = "Small toolkit: prefixed logging, console output, identity-based arrays, boxed numbers, mutable strings, raster images with BMP output, and CPU characteristics."
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "image", "cpu", "cache", "console", "logging", "array"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bwkit"]

[tool.pytest.ini_options]
addopts = "-ra"
