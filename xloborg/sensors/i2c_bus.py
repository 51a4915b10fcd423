"""
I2C bus transport for the XLoBorg drivers.

Thin byte-level wrapper around smbus2. Each method is a single blocking bus
transaction; failures are raised as I2CBusError with the device address and
register that were being accessed. There is no retry logic here, callers
decide how to recover.
"""

import logging
from typing import List

from smbus2 import SMBus

from .errors import I2CBusError

logger = logging.getLogger(__name__)


class I2CBus:
    """
    Owns one open smbus2 handle.

    Example Usage:
    >>> with I2CBus(1) as bus:
    ...     status = bus.read_byte(0x1C, 0x00)
    """

    def __init__(self, bus: int = 1):
        """
        Open the I2C bus.

        Args:
            bus: I2C bus number (1 on Raspberry Pi Rev 2, 0 on Rev 1)
        """
        self.bus_num = bus
        try:
            self._smbus = SMBus(bus)
        except OSError as e:
            logger.error(f"Failed to open I2C bus {bus}: {e}")
            raise I2CBusError(f"I2C bus {bus} not accessible: {e}") from e
        logger.debug(f"I2C bus {bus} opened")

    def read_byte(self, address: int, register: int) -> int:
        """Read one byte from a device register."""
        try:
            return self._smbus.read_byte_data(address, register)
        except OSError as e:
            raise I2CBusError(
                f"Failed to read register 0x{register:02X} "
                f"on device 0x{address:02X}: {e}",
                address=address,
                register=register,
            ) from e

    def write_byte(self, address: int, register: int, value: int) -> None:
        """Write one byte to a device register."""
        try:
            self._smbus.write_byte_data(address, register, value)
        except OSError as e:
            raise I2CBusError(
                f"Failed to write 0x{value:02X} to register 0x{register:02X} "
                f"on device 0x{address:02X}: {e}",
                address=address,
                register=register,
            ) from e

    def read_block(self, address: int, register: int, length: int) -> bytes:
        """
        Read a contiguous block of bytes starting at a register.

        Args:
            address: 7-bit device address
            register: First register of the block
            length: Number of bytes to read (at most 32, SMBus limit)

        Returns:
            Raw bytes, exactly `length` long
        """
        try:
            data: List[int] = self._smbus.read_i2c_block_data(address, register, length)
        except OSError as e:
            raise I2CBusError(
                f"Failed to read {length} bytes from register 0x{register:02X} "
                f"on device 0x{address:02X}: {e}",
                address=address,
                register=register,
            ) from e

        if len(data) != length:
            raise I2CBusError(
                f"Short read from device 0x{address:02X}: "
                f"expected {length} bytes, got {len(data)}",
                address=address,
                register=register,
            )
        return bytes(data)

    def close(self) -> None:
        """Close the I2C bus connection"""
        try:
            self._smbus.close()
            logger.debug(f"I2C bus {self.bus_num} closed")
        except OSError as e:
            logger.warning(f"Error closing I2C bus: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
