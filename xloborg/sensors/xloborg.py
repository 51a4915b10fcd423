"""
XLoBorg Interface
Combines the MMA8452Q accelerometer and MAG3110 compass behind one object
that owns the I2C bus.

Hardware Setup:
- XLoBorg on the Raspberry Pi GPIO header, I2C bus 1 (bus 0 on Rev 1 boards)
- Accelerometer at 0x1C, compass at 0x0E

All public operations take the same lock, so one full sequence (for example
the compass pointer reset and its block read) never interleaves with
another caller's bus traffic.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import NotInitializedError, XLoBorgError
from .i2c_bus import I2CBus
from .mag3110 import MAG3110
from .mma8452q import MMA8452Q

logger = logging.getLogger(__name__)

DEFAULT_BUS = 1
DEFAULT_TEMPERATURE_OFFSET = 0


@dataclass(frozen=True)
class XLoBorgReading:
    """One pass over all three sensors"""

    accelerometer: Tuple[float, float, float]
    compass: Tuple[int, int, int]
    temperature: int

    def to_dict(self) -> dict:
        return {
            "accelerometer": list(self.accelerometer),
            "compass": list(self.compass),
            "temperature": self.temperature,
        }


class XLoBorg:
    """
    XLoBorg accelerometer + compass driver.

    Example Usage:
    >>> xlo = XLoBorg(bus=1)
    >>> xlo.init()
    >>> gx, gy, gz = xlo.read_accelerometer()
    >>> mx, my, mz = xlo.read_compass()
    >>> temp = xlo.read_temperature()
    >>> xlo.close()
    """

    def __init__(
        self, bus: int = DEFAULT_BUS, temp_offset: int = DEFAULT_TEMPERATURE_OFFSET
    ):
        """
        Args:
            bus: I2C bus number
            temp_offset: Added to every temperature reading
        """
        self.bus_num = bus
        self.temp_offset = temp_offset
        self.bus: Optional[I2CBus] = None
        self.accelerometer: Optional[MMA8452Q] = None
        self.compass: Optional[MAG3110] = None
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def init(self) -> None:
        """
        Open the I2C bus and configure both devices.

        The accelerometer is probed and configured first; if that fails the
        compass is never touched. On failure the bus is closed again and the
        error is re-raised, so init() may be retried by the caller.

        Raises:
            XLoBorgError: if already initialized
            I2CBusError: bus could not be opened
            DeviceNotFoundError: a device did not answer its probe
            RegisterWriteError: a configuration write failed
        """
        with self._lock:
            if self._initialized:
                raise XLoBorgError("XLoBorg already initialized")

            logger.info(f"Loading XLoBorg on bus {self.bus_num}")
            bus = I2CBus(self.bus_num)
            accelerometer = MMA8452Q(bus)
            compass = MAG3110(bus, temp_offset=self.temp_offset)

            try:
                accelerometer.initialize()
                compass.initialize()
            except Exception as e:
                logger.error(f"XLoBorg initialization failed: {e}")
                bus.close()
                raise

            self.bus = bus
            self.accelerometer = accelerometer
            self.compass = compass
            self._initialized = True
            logger.info("XLoBorg ready")

    def _require_init(self) -> None:
        if not self._initialized:
            raise NotInitializedError("XLoBorg.init() must succeed before reading")

    def read_accelerometer(self) -> Tuple[float, float, float]:
        """Read the X, Y and Z axis force, in G"""
        with self._lock:
            self._require_init()
            return self.accelerometer.read_acceleration()

    def read_compass(self) -> Tuple[int, int, int]:
        """Read the X, Y and Z axis raw magnetometer counts"""
        with self._lock:
            self._require_init()
            return self.compass.read_magnetic_field()

    def read_temperature(self) -> int:
        """Read the compass die temperature, offset applied"""
        with self._lock:
            self._require_init()
            return self.compass.read_temperature()

    def read_all(self) -> XLoBorgReading:
        """
        Read accelerometer, compass and temperature in that order.

        The first failure aborts the whole reading; no partial result is
        returned.
        """
        with self._lock:
            self._require_init()
            return XLoBorgReading(
                accelerometer=self.accelerometer.read_acceleration(),
                compass=self.compass.read_magnetic_field(),
                temperature=self.compass.read_temperature(),
            )

    def close(self) -> None:
        """Release the I2C bus"""
        with self._lock:
            if self.bus is not None:
                self.bus.close()
                logger.info("XLoBorg I2C bus closed")
            self.bus = None
            self.accelerometer = None
            self.compass = None
            self._initialized = False

    def __enter__(self):
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
