"""High-level command API for tacho motors"""
import logging
from typing import FrozenSet, Sequence, Tuple

from .exceptions import AttributeIOError
from .motor_interface import (
    AttributeIO, AttributeValue, MotorAttribute, MotorCommand, MotorState,
    OutPort, StopAction, StopCommand, check_width
)
from .port_resolver import PortResolver

logger = logging.getLogger(__name__)


class TachoMotorController:
    """
    Translates motor commands into attribute reads and writes

    Each call resolves the port to its device directory first, then
    performs the attribute sequence for the command in a fixed order.
    Writes are not read back and are never rolled back: if a later write in
    a sequence fails, the earlier ones stay in effect.

    No locking is done. Callers driving the same port from several threads
    must serialize access themselves.
    """

    def __init__(self, resolver: PortResolver, attribute_io: AttributeIO):
        """
        Initialize motor controller

        Args:
            resolver: Port to device directory lookup
            attribute_io: Attribute file reader/writer
        """
        self.resolver = resolver
        self.attribute_io = attribute_io

        logger.info(f"Tacho motor controller initialized (root={resolver.root_path})")

    def _write_sequence(self, port: OutPort, steps: Sequence[Tuple[MotorAttribute, AttributeValue]]):
        device = self.resolver.resolve(port)
        completed = []
        for attribute, value in steps:
            try:
                self.attribute_io.write(device, attribute, value)
            except AttributeIOError as e:
                if completed:
                    raise e.with_completed(tuple(completed)) from e
                raise
            completed.append(attribute)

    def run(self, port: OutPort, speed: int):
        """
        Run the motor until told otherwise

        The meaning of `speed` depends on the regulation mode. With regulation
        off (the driver default) it is a power percentage from -100 to 100.
        With regulation on the driver holds the motor at `speed`, roughly
        -1000 to 1000 depending on the motor type. Negative values reverse.

        Args:
            port: Output port of the motor
            speed: Speed setpoint (int16)
        """
        check_width(speed, 16, 'speed')
        self._write_sequence(port, [
            (MotorAttribute.SPEED_SP, speed),
            (MotorAttribute.COMMAND, MotorCommand.RUN_FOREVER),
        ])

    def run_to_abs_position(self, port: OutPort, speed: int, position: int):
        """
        Run to an absolute position and hold there

        Forces stop_action to 'hold', replacing whatever was configured.

        Args:
            port: Output port of the motor
            speed: Speed setpoint (int16)
            position: Target position in tacho counts (int16)
        """
        check_width(speed, 16, 'speed')
        check_width(position, 16, 'position')
        self._write_sequence(port, [
            (MotorAttribute.POSITION_SP, position),
            (MotorAttribute.SPEED_SP, speed),
            (MotorAttribute.STOP_ACTION, StopAction.HOLD),
            (MotorAttribute.COMMAND, MotorCommand.RUN_TO_ABS_POS),
        ])

    def reset(self, port: OutPort):
        """Reset the motor driver to its defaults"""
        self._write_sequence(port, [(MotorAttribute.COMMAND, MotorCommand.RESET)])

    def stop(self, port: OutPort):
        """Stop the motor using the currently configured stop action"""
        self._write_sequence(port, [(MotorAttribute.COMMAND, MotorCommand.STOP)])

    def current_speed(self, port: OutPort) -> int:
        """Read the operating speed of the motor"""
        return self.attribute_io.read_int16(self.resolver.resolve(port), MotorAttribute.SPEED)

    def current_power(self, port: OutPort) -> int:
        """Read the operating power (duty cycle) of the motor"""
        return self.attribute_io.read_int16(self.resolver.resolve(port), MotorAttribute.DUTY_CYCLE)

    def enable_brake_mode(self, port: OutPort):
        """Make the motor brake when stopped"""
        self._write_sequence(port, [(MotorAttribute.STOP_COMMAND, StopCommand.BRAKE)])

    def disable_brake_mode(self, port: OutPort):
        """Make the motor coast when stopped. Brake mode is off by default."""
        self._write_sequence(port, [(MotorAttribute.STOP_COMMAND, StopCommand.COAST)])

    def current_position(self, port: OutPort) -> int:
        """Read the position of the motor in tacho counts"""
        return self.attribute_io.read_int32(self.resolver.resolve(port), MotorAttribute.POSITION)

    def initialize_position(self, port: OutPort, value: int):
        """
        Set the position counter of the motor

        Args:
            port: Output port of the motor
            value: New position value (int32)
        """
        check_width(value, 32, 'value')
        self._write_sequence(port, [(MotorAttribute.POSITION, value)])

    def hold_stop_action(self, port: OutPort):
        """Make a subsequent stop hold position"""
        self._write_sequence(port, [(MotorAttribute.STOP_ACTION, StopAction.HOLD)])

    def coast_stop_action(self, port: OutPort):
        """Make a subsequent stop coast"""
        self._write_sequence(port, [(MotorAttribute.STOP_ACTION, StopAction.COAST)])

    def get_state(self, port: OutPort) -> str:
        """Read the raw state string reported by the driver"""
        return self.attribute_io.read_string(self.resolver.resolve(port), MotorAttribute.STATE)

    def state_flags(self, port: OutPort) -> FrozenSet[MotorState]:
        """
        Read the state of the motor as a set of flags

        An idle motor reports an empty state. Tokens outside the documented
        flags are dropped; use get_state() to see them.
        """
        flags = set()
        for token in self.get_state(port).split():
            try:
                flags.add(MotorState(token))
            except ValueError:
                logger.debug(f"Ignoring unknown state token {token!r} on {port.value}")
        return frozenset(flags)

    def get_status(self, port: OutPort) -> dict:
        """Get a read-only snapshot of the motor"""
        device = self.resolver.resolve(port)
        io = self.attribute_io
        return {
            'port': port.value,
            'device': device,
            'speed': io.read_int16(device, MotorAttribute.SPEED),
            'power': io.read_int16(device, MotorAttribute.DUTY_CYCLE),
            'position': io.read_int32(device, MotorAttribute.POSITION),
            'state': io.read_string(device, MotorAttribute.STATE)
        }
