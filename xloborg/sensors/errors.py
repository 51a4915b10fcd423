"""
Exceptions raised by the XLoBorg drivers.

Hierarchy:
- XLoBorgError
  - I2CBusError: any failed bus transaction
    - RegisterWriteError: a configuration write failed during initialization
  - DeviceNotFoundError: presence probe failed (wrong hardware or wiring)
  - NotInitializedError: read attempted before a successful init()
"""

from typing import Optional


class XLoBorgError(Exception):
    """Base exception for XLoBorg errors"""
    pass


class I2CBusError(XLoBorgError):
    """Custom exception for I2C transport errors"""

    def __init__(
        self,
        message: str,
        address: Optional[int] = None,
        register: Optional[int] = None,
    ):
        super().__init__(message)
        self.address = address
        self.register = register


class RegisterWriteError(I2CBusError):
    """A step of an initialization sequence failed"""

    def __init__(self, message: str, step: str, address: int, register: int):
        super().__init__(message, address=address, register=register)
        self.step = step


class DeviceNotFoundError(XLoBorgError):
    """Presence probe did not get an answer from the device"""

    def __init__(self, device: str, address: int):
        super().__init__(f"Missing {device} at 0x{address:02X}")
        self.device = device
        self.address = address


class NotInitializedError(XLoBorgError):
    pass
