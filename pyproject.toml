[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ev3robot"
version = "0.1.0"
description = "Control LEGO EV3 motors and sensors through the ev3dev sysfs device interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["ev3", "ev3dev", "lego", "robotics", "motor", "sensor", "sysfs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ev3robot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
