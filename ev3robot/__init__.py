"""Control LEGO EV3 motors and sensors through the ev3dev sysfs interface."""

__version__ = "0.1.0"