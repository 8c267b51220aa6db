[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohmimetro"
version = "0.1.0"
description = "Resistance meter logic: voltage-divider measurement, E24 rounding, colour bands and an SSD1306 frame buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ohmmeter", "resistor", "e24", "color code", "ssd1306", "oled", "voltage divider"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ohmimetro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
