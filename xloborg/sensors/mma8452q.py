"""
MMA8452Q Accelerometer Interface
Byte-level register access over the shared XLoBorg I2C bus.

The device is configured for ±2G range in fast read mode, so each axis is a
single signed byte. A read fetches STATUS + X + Y + Z in one block.
"""

from typing import Tuple

from .registers import (
    ACCEL_ADDRESS,
    ACCEL_DATA_LENGTH,
    ACCEL_INIT_SEQUENCE,
    ACCEL_STATUS,
    G_PER_COUNT,
    probe_device,
    run_sequence,
    to_signed8,
)


class MMA8452Q:
    """
    MMA8452Q 3-axis accelerometer driver.

    Example Usage:
    >>> accel = MMA8452Q(bus)
    >>> accel.initialize()
    >>> x, y, z = accel.read_acceleration()
    """

    name = "accelerometer"

    def __init__(self, bus, address: int = ACCEL_ADDRESS):
        """
        Args:
            bus: Open I2CBus shared with the compass
            address: I2C address (0x1C on the XLoBorg)
        """
        self.bus = bus
        self.address = address

    def initialize(self) -> None:
        """
        Probe the device and put it in active ±2G measurement mode.

        Sequence: CTRL_REG1, XYZ_DATA_CFG, SYSMOD, then reset the register
        pointer to 0x00. Stops at the first failed write.
        """
        probe_device(self.bus, self.name, self.address)
        run_sequence(self.bus, self.address, ACCEL_INIT_SEQUENCE)

    def read_acceleration(self) -> Tuple[float, float, float]:
        """
        Read accelerometer data (X, Y, Z axes).

        Returns:
            Tuple of (x, y, z) in G
        """
        data = self.bus.read_block(self.address, ACCEL_STATUS, ACCEL_DATA_LENGTH)
        x, y, z = (to_signed8(b) * G_PER_COUNT for b in data[1:4])
        return x, y, z
