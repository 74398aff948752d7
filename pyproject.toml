[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qrversions"
version = "0.1.0"
description = "QR code version tables: capacity lookup, sizes, alignment patterns and version information"
requires-python = ">=3.10"
dependencies = []
keywords = ["qr", "qrcode", "qr-version", "capacity", "symbol"]
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
packages = ["qrversions"]

[tool.pytest.ini_options]
addopts = "-ra"
