"""
Tests for the sampling loop entry point
"""

import unittest
import sys
from pathlib import Path
from unittest.mock import Mock, patch

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from xloborg import main
from xloborg.sensors import I2CBusError, XLoBorgReading

READING = XLoBorgReading(
    accelerometer=(0.0, 0.015625, 1.0),
    compass=(10, -1, 256),
    temperature=25,
)


class TestMainLoop(unittest.TestCase):

    def setUp(self):
        main._running = True
        self.xlo = Mock()

    def tearDown(self):
        main._running = True

    @patch('xloborg.main.time.sleep')
    def test_stops_on_read_failure(self, mock_sleep):
        """A failed read halts the loop instead of skipping"""
        self.xlo.read_all.side_effect = [READING, I2CBusError("Remote I/O error"), READING]

        with patch('builtins.print'):
            with self.assertRaises(I2CBusError):
                main.main_loop(self.xlo, interval=0.5)

        self.assertEqual(self.xlo.read_all.call_count, 2)
        mock_sleep.assert_called_once_with(0.5)

    @patch('xloborg.main.time.sleep')
    def test_read_failure_logged_once(self, mock_sleep):
        """main() reports the failure; the loop only propagates it"""
        self.xlo.read_all.side_effect = I2CBusError("Remote I/O error")

        with patch('builtins.print'), patch('xloborg.main.logger') as mock_logger:
            with self.assertRaises(I2CBusError):
                main.main_loop(self.xlo)

        mock_logger.error.assert_not_called()
        mock_sleep.assert_not_called()

    @patch('xloborg.main.time.sleep')
    def test_stops_when_signalled(self, mock_sleep):
        def read_and_stop():
            main._running = False
            return READING

        self.xlo.read_all.side_effect = read_and_stop

        with patch('builtins.print') as mock_print:
            main.main_loop(self.xlo, interval=0.1)

        self.assertEqual(self.xlo.read_all.call_count, 1)
        printed = mock_print.call_args_list[-1][0][0]
        self.assertIn("256", printed)
        self.assertIn("25", printed)

    def test_signal_handler(self):
        main.signal_handler(None, None)

        self.assertFalse(main._running)

    @patch('xloborg.main.XLoBorg')
    def test_initialize_components(self, mock_xloborg):
        xlo = main.initialize_components(bus=0, temp_offset=3)

        mock_xloborg.assert_called_once_with(bus=0, temp_offset=3)
        xlo.init.assert_called_once()

    def test_shutdown(self):
        main.shutdown(self.xlo)
        self.xlo.close.assert_called_once()

        main.shutdown(None)


if __name__ == '__main__':
    unittest.main(verbosity=2)
