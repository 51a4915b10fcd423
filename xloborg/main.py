"""
XLoBorg - Sensor Monitor
Main Entry Point

Initializes the XLoBorg and prints accelerometer, compass and temperature
readings on a fixed interval until interrupted. A failed read stops the
loop rather than skipping the sample.
"""

import logging
import signal
import sys
import time

from xloborg.sensors import XLoBorg, XLoBorgError

# === CONFIGURATION ===
I2C_BUS = 1  # 0 for Rev 1 Raspberry Pi boards
TEMPERATURE_OFFSET = 0  # Added to every temperature reading
SAMPLE_INTERVAL = 0.5  # Seconds between full read cycles
LOG_FILE = "xloborg.log"

logger = logging.getLogger(__name__)

# === GLOBAL STATE ===
_running = True


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout), logging.FileHandler(LOG_FILE)],
    )


def signal_handler(sig, frame):
    """Handle Ctrl+C for graceful shutdown"""
    global _running
    logger.info("Shutdown signal received...")
    _running = False


def initialize_components(bus: int = I2C_BUS, temp_offset: int = TEMPERATURE_OFFSET):
    """
    Open the bus and configure the XLoBorg.

    Returns:
        Initialized XLoBorg
    """
    logger.info("=" * 60)
    logger.info("XLoBorg - Sensor Monitor")
    logger.info("=" * 60)

    xlo = XLoBorg(bus=bus, temp_offset=temp_offset)
    xlo.init()
    logger.info(f"✓ XLoBorg initialized on bus {bus}")
    return xlo


def main_loop(xlo: XLoBorg, interval: float = SAMPLE_INTERVAL) -> None:
    """
    Read all sensors, print, wait, repeat.

    Each cycle finishes before the pause; the loop exits when the running
    flag is cleared or on the first read error, which propagates to the
    caller.
    """
    print(f"\n{'ACCEL X':>8} {'ACCEL Y':>8} {'ACCEL Z':>8} | "
          f"{'MAG X':>6} {'MAG Y':>6} {'MAG Z':>6} | {'TEMP':>4}")
    print("-" * 62)

    while _running:
        reading = xlo.read_all()

        gx, gy, gz = reading.accelerometer
        mx, my, mz = reading.compass
        print(f"{gx:>8.3f} {gy:>8.3f} {gz:>8.3f} | "
              f"{mx:>6d} {my:>6d} {mz:>6d} | {reading.temperature:>4d}")

        time.sleep(interval)


def shutdown(xlo) -> None:
    """Graceful shutdown and cleanup"""
    logger.info("Shutting down...")
    if xlo is not None:
        xlo.close()
    logger.info("Shutdown complete. Goodbye!")


def main():
    """
    Main entry point

    Initializes the XLoBorg and runs the sampling loop.
    Handles graceful shutdown on Ctrl+C.
    """
    setup_logging()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    xlo = None
    try:
        xlo = initialize_components()
        main_loop(xlo)
    except XLoBorgError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)
    finally:
        shutdown(xlo)


if __name__ == "__main__":
    main()
