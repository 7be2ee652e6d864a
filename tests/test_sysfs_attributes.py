import os
import tempfile
import unittest

from tacho_motor.drivers.sysfs_attributes import SysfsAttributeIO
from tacho_motor.exceptions import AttributeIOError
from tacho_motor.motor_interface import MotorAttribute, MotorCommand, StopAction


class TestSysfsAttributeIO(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.device = self._tmp.name
        self.io = SysfsAttributeIO()

    def tearDown(self):
        self._tmp.cleanup()

    def put(self, attribute: MotorAttribute, content: str):
        with open(os.path.join(self.device, attribute.value), 'w') as f:
            f.write(content)

    def get(self, attribute: MotorAttribute) -> str:
        with open(os.path.join(self.device, attribute.value)) as f:
            return f.read()

    def test_read_string_strips_trailing_whitespace(self):
        self.put(MotorAttribute.ADDRESS, 'ev3-ports:outA\n')
        self.assertEqual(self.io.read_string(self.device, MotorAttribute.ADDRESS), 'ev3-ports:outA')

    def test_read_int16(self):
        self.put(MotorAttribute.SPEED, '-350\n')
        self.assertEqual(self.io.read_int16(self.device, MotorAttribute.SPEED), -350)

    def test_read_int16_limits(self):
        for content, expected in (('32767', 32767), ('-32768', -32768)):
            with self.subTest(content=content):
                self.put(MotorAttribute.SPEED, content)
                self.assertEqual(self.io.read_int16(self.device, MotorAttribute.SPEED), expected)

        self.put(MotorAttribute.SPEED, '32768')
        with self.assertRaises(AttributeIOError):
            self.io.read_int16(self.device, MotorAttribute.SPEED)

    def test_read_int32(self):
        self.put(MotorAttribute.POSITION, '-2147483648\n')
        self.assertEqual(self.io.read_int32(self.device, MotorAttribute.POSITION), -2147483648)

        self.put(MotorAttribute.POSITION, '2147483648\n')
        with self.assertRaises(AttributeIOError):
            self.io.read_int32(self.device, MotorAttribute.POSITION)

    def test_malformed_integer(self):
        self.put(MotorAttribute.DUTY_CYCLE, '')
        with self.assertRaises(AttributeIOError) as ctx:
            self.io.read_int16(self.device, MotorAttribute.DUTY_CYCLE)
        self.assertIs(ctx.exception.attribute, MotorAttribute.DUTY_CYCLE)
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_missing_file_on_read(self):
        with self.assertRaises(AttributeIOError) as ctx:
            self.io.read_string(self.device, MotorAttribute.STATE)
        self.assertEqual(ctx.exception.device, self.device)
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_write_tokens_and_integers(self):
        self.put(MotorAttribute.COMMAND, '')
        self.put(MotorAttribute.STOP_ACTION, 'coast')
        self.put(MotorAttribute.SPEED_SP, '0')

        self.io.write(self.device, MotorAttribute.COMMAND, MotorCommand.RUN_TO_ABS_POS)
        self.io.write(self.device, MotorAttribute.STOP_ACTION, StopAction.HOLD)
        self.io.write(self.device, MotorAttribute.SPEED_SP, -1000)

        self.assertEqual(self.get(MotorAttribute.COMMAND), 'run-to-abs-pos')
        self.assertEqual(self.get(MotorAttribute.STOP_ACTION), 'hold')
        self.assertEqual(self.get(MotorAttribute.SPEED_SP), '-1000')

    def test_write_rejects_free_form_strings(self):
        self.put(MotorAttribute.COMMAND, '')
        for value in ('run-forever', True, 1.0):
            with self.subTest(value=value):
                with self.assertRaises(TypeError):
                    self.io.write(self.device, MotorAttribute.COMMAND, value)
        self.assertEqual(self.get(MotorAttribute.COMMAND), '')

    def test_write_never_creates_files(self):
        with self.assertRaises(AttributeIOError):
            self.io.write(self.device, MotorAttribute.COMMAND, MotorCommand.STOP)
        self.assertFalse(os.path.exists(os.path.join(self.device, 'command')))


if __name__ == '__main__':
    unittest.main()
