# XLoBorg - accelerometer and compass driver

from .sensors import XLoBorg, XLoBorgError, XLoBorgReading

__all__ = ["XLoBorg", "XLoBorgError", "XLoBorgReading"]
__version__ = "0.1.0"
