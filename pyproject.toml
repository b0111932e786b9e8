[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcuframe"
version = "0.1.0"
description = "Microcontroller-style building blocks: GPIO, stepper, encoder, PWM and ADC drivers over pluggable backends, plus PID, Modbus, CRC-16, register banks and menus."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "gpio",
    "stepper",
    "encoder",
    "pwm",
    "modbus",
    "pid",
    "crc16",
    "bcd",
    "menu",
]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mcuframe"]

[tool.pytest.ini_options]
addopts = "-ra"
