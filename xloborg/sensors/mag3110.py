"""
MAG3110 Magnetometer (Compass) Interface
Byte-level register access over the shared XLoBorg I2C bus.

Every read first writes 0 to DR_STATUS to reset the register pointer, then
reads an 18-byte block from 0x00. Both the field and the die temperature
come from that block:
- bytes 1-6: X, Y, Z as MSB/LSB pairs (signed 16-bit raw counts)
- byte 16: die temperature (signed 8-bit)
"""

from typing import Tuple

from .registers import (
    COMPASS_ADDRESS,
    COMPASS_DATA_LENGTH,
    COMPASS_DR_STATUS,
    COMPASS_INIT_SEQUENCE,
    COMPASS_TEMP_OFFSET,
    COMPASS_X_MSB,
    probe_device,
    run_sequence,
    to_signed8,
    to_signed16,
)


class MAG3110:
    """
    MAG3110 3-axis magnetometer driver.

    Field values are returned as raw counts; no unit conversion or offset
    correction is applied. The temperature offset is added to every die
    temperature read.
    """

    name = "compass"

    def __init__(self, bus, address: int = COMPASS_ADDRESS, temp_offset: int = 0):
        """
        Args:
            bus: Open I2CBus shared with the accelerometer
            address: I2C address (0x0E on the XLoBorg)
            temp_offset: Added to each temperature reading
        """
        self.bus = bus
        self.address = address
        self.temp_offset = temp_offset

    def initialize(self) -> None:
        """Probe the device and start continuous raw measurements."""
        probe_device(self.bus, self.name, self.address)
        run_sequence(self.bus, self.address, COMPASS_INIT_SEQUENCE)

    def _read_block(self) -> bytes:
        # The pointer reset must come right before the block read
        self.bus.write_byte(self.address, COMPASS_DR_STATUS, 0)
        return self.bus.read_block(self.address, COMPASS_DR_STATUS, COMPASS_DATA_LENGTH)

    def read_magnetic_field(self) -> Tuple[int, int, int]:
        """
        Read the X, Y and Z axis raw magnetometer readings.

        Returns:
            Tuple of (x, y, z) signed 16-bit counts
        """
        data = self._read_block()
        raw = data[COMPASS_X_MSB:COMPASS_X_MSB + 6]
        x = to_signed16(raw[0], raw[1])
        y = to_signed16(raw[2], raw[3])
        z = to_signed16(raw[4], raw[5])
        return x, y, z

    def read_temperature(self) -> int:
        """Read the die temperature, offset applied"""
        data = self._read_block()
        return to_signed8(data[COMPASS_TEMP_OFFSET]) + self.temp_offset
