[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "helmdisplay"
version = "0.1.0"
description = "Serial message queueing, NMEA 0183 and PVCI decoding, passcode entry and CAN/UART/database viewer logic for a marine helm display"
requires-python = ">=3.10"
dependencies = []
keywords = ["nmea0183", "vtg", "uart", "can", "pvci", "marine", "hmi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["helmdisplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
