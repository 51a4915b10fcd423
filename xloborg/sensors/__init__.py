# XLoBorg - Sensor Modules
# Byte-level I2C drivers for the MMA8452Q accelerometer and MAG3110 compass

from .errors import (
    DeviceNotFoundError,
    I2CBusError,
    NotInitializedError,
    RegisterWriteError,
    XLoBorgError,
)
from .i2c_bus import I2CBus
from .mag3110 import MAG3110
from .mma8452q import MMA8452Q
from .xloborg import XLoBorg, XLoBorgReading

__all__ = [
    "DeviceNotFoundError",
    "I2CBus",
    "I2CBusError",
    "MAG3110",
    "MMA8452Q",
    "NotInitializedError",
    "RegisterWriteError",
    "XLoBorg",
    "XLoBorgError",
    "XLoBorgReading",
]
