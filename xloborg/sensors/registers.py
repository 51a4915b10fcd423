"""
XLoBorg register map and initialization sequences.

The XLoBorg carries two devices on the same I2C bus:
- MMA8452Q 3-axis accelerometer at 0x1C
- MAG3110 3-axis magnetometer (compass) at 0x0E

Register addresses, bit positions and the packed byte values below are what
the hardware expects; do not change them.

MMA8452Q Registers used:
- 0x00 (STATUS): Status byte, followed by X, Y, Z (8-bit, fast read)
- 0x0B (SYSMOD): System mode
- 0x0E (XYZ_DATA_CFG): Range and high-pass filter output
- 0x2A (CTRL_REG1): Sleep rate, data rate, noise mode, read mode, active

MAG3110 Registers used:
- 0x00 (DR_STATUS): Status byte, followed by X, Y, Z (16-bit, MSB first)
- 0x10 (CTRL_REG1): Data rate, oversampling, fast read, trigger, active
- 0x11 (CTRL_REG2): Auto reset, raw mode, sensor reset
"""

import logging
from typing import NamedTuple, Sequence

from .errors import DeviceNotFoundError, I2CBusError, RegisterWriteError

logger = logging.getLogger(__name__)

# === Device addresses ===
ACCEL_ADDRESS = 0x1C
COMPASS_ADDRESS = 0x0E

# Register read to check a device answers
PROBE_REGISTER = 0x01

# === MMA8452Q (accelerometer) ===
ACCEL_STATUS = 0x00
ACCEL_SYSMOD = 0x0B
ACCEL_XYZ_DATA_CFG = 0x0E
ACCEL_CTRL_REG1 = 0x2A

ACCEL_DATA_LENGTH = 4  # status + X + Y + Z

# Number of G represented by the LSB at the configured ±2G range
G_PER_COUNT = 2.0 / 128

# === MAG3110 (compass) ===
COMPASS_DR_STATUS = 0x00
COMPASS_CTRL_REG1 = 0x10
COMPASS_CTRL_REG2 = 0x11

COMPASS_DATA_LENGTH = 18
COMPASS_X_MSB = 1  # X, Y, Z follow as MSB/LSB pairs
COMPASS_TEMP_OFFSET = 16  # die temperature byte within the block
# Bytes 0, 7-15 and 17 of the block are not used by this driver


class BitField(NamedTuple):
    """Position and width of a field inside a byte-wide register"""

    shift: int
    width: int = 1

    def encode(self, value: int) -> int:
        if not 0 <= value < (1 << self.width):
            raise ValueError(
                f"Value {value} does not fit in a {self.width}-bit field"
            )
        return value << self.shift


def pack(*fields) -> int:
    """
    Build a register byte from (BitField, value) pairs.

    >>> pack((BitField(7), 1), (BitField(3, 2), 3))
    152
    """
    data = 0
    for field, value in fields:
        data |= field.encode(value)
    return data


# MMA8452Q CTRL_REG1 fields
ACCEL_ASLP_RATE = BitField(6, 2)
ACCEL_DATA_RATE = BitField(4, 2)
ACCEL_LNOISE = BitField(2)
ACCEL_READ_MODE = BitField(1)
ACCEL_ACTIVE = BitField(0)

# MMA8452Q XYZ_DATA_CFG fields
ACCEL_HPF_OUT = BitField(4)
ACCEL_FS = BitField(0, 2)

ACCEL_ASLP_RATE_50HZ = 0
ACCEL_DATA_RATE_800HZ = 0
ACCEL_FS_2G = 0
ACCEL_SYSMOD_WAKE = 0x01

# MAG3110 CTRL_REG2 fields
COMPASS_AUTO_MRST_EN = BitField(7)
COMPASS_RAW = BitField(5)
COMPASS_MAG_RST = BitField(4)

# MAG3110 CTRL_REG1 fields
COMPASS_DATA_RATE = BitField(5, 3)
COMPASS_OVERSAMPLE = BitField(3, 2)
COMPASS_FAST_READ = BitField(2)
COMPASS_TRIGGER = BitField(1)
COMPASS_ACTIVE = BitField(0)

COMPASS_OVERSAMPLE_128 = 3


class RegisterWrite(NamedTuple):
    """One step of an initialization sequence"""

    name: str
    register: int
    value: int


ACCEL_INIT_SEQUENCE = (
    RegisterWrite(
        "CTRL_REG1",
        ACCEL_CTRL_REG1,
        pack(
            (ACCEL_ASLP_RATE, ACCEL_ASLP_RATE_50HZ),
            (ACCEL_DATA_RATE, ACCEL_DATA_RATE_800HZ),
            (ACCEL_LNOISE, 0),  # No reduced noise mode
            (ACCEL_READ_MODE, 1),
            (ACCEL_ACTIVE, 1),
        ),
    ),
    RegisterWrite(
        "XYZ_DATA_CFG",
        ACCEL_XYZ_DATA_CFG,
        pack((ACCEL_HPF_OUT, 0), (ACCEL_FS, ACCEL_FS_2G)),
    ),
    RegisterWrite("SYSMOD", ACCEL_SYSMOD, ACCEL_SYSMOD_WAKE),
    # Point back at the start of the data block
    RegisterWrite("STATUS", ACCEL_STATUS, 0x00),
)

COMPASS_INIT_SEQUENCE = (
    RegisterWrite(
        "CTRL_REG2",
        COMPASS_CTRL_REG2,
        pack(
            (COMPASS_AUTO_MRST_EN, 1),  # Reset before each acquisition
            (COMPASS_RAW, 1),  # Raw mode, user offsets not applied
            (COMPASS_MAG_RST, 0),  # Reset cycle disabled
        ),
    ),
    RegisterWrite(
        "CTRL_REG1",
        COMPASS_CTRL_REG1,
        pack(
            (COMPASS_DATA_RATE, 0),  # 10 Hz with 128x oversampling
            (COMPASS_OVERSAMPLE, COMPASS_OVERSAMPLE_128),
            (COMPASS_FAST_READ, 0),
            (COMPASS_TRIGGER, 0),  # Continuous measurement
            (COMPASS_ACTIVE, 1),
        ),
    ),
)


def probe_device(bus, device: str, address: int) -> None:
    """
    Check a device answers with a one-byte read of PROBE_REGISTER.

    Raises:
        DeviceNotFoundError: if the read fails
    """
    try:
        bus.read_byte(address, PROBE_REGISTER)
    except I2CBusError as e:
        logger.error(f"Missing {device} at 0x{address:02X}")
        raise DeviceNotFoundError(device, address) from e
    logger.info(f"Found {device} at 0x{address:02X}")


def run_sequence(bus, address: int, steps: Sequence[RegisterWrite]) -> None:
    """
    Write each step to the device in order, stopping at the first failure.

    Args:
        bus: Open I2CBus
        address: Device address
        steps: Register writes to perform

    Raises:
        RegisterWriteError: naming the step that failed; later steps are
            never sent
    """
    for step in steps:
        try:
            bus.write_byte(address, step.register, step.value)
        except I2CBusError as e:
            logger.error(f"Failed sending {step.name} to 0x{address:02X}!")
            raise RegisterWriteError(
                f"Failed sending {step.name} (register 0x{step.register:02X}) "
                f"to device 0x{address:02X}: {e}",
                step=step.name,
                address=address,
                register=step.register,
            ) from e
        logger.debug(f"Sent {step.name}=0x{step.value:02X} to 0x{address:02X}")


def to_signed8(value: int) -> int:
    """Interpret a raw byte as two's complement"""
    if value & 0x80:
        value -= 0x100
    return value


def to_signed16(msb: int, lsb: int) -> int:
    """Combine a big-endian byte pair into a signed 16-bit value"""
    value = (msb << 8) | lsb
    if value & 0x8000:
        value -= 0x10000
    return value
