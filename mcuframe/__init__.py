"""GPIO, stepper, encoder, PWM and ADC drivers over pluggable backends, with PID, Modbus, CRC-16, register banks and menus."""

__version__ = "0.1.0"