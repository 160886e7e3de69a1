[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ruststats"
version = "0.1.0"
description = "CPU usage and temperature monitors with sparklines for i3blocks and i3status"
requires-python = ">=3.10"
dependencies = []
keywords = ["i3blocks", "i3status", "cpu", "temperature", "sparkline", "monitoring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ruststats-cpu = "ruststats.cpu:main"
ruststats-temperature = "ruststats.temperature:main"

[tool.hatch.build.targets.wheel]
packages = ["ruststats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
