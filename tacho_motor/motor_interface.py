"""Tacho motor attribute protocol and I/O interface"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Union


class OutPort(Enum):
    """Output ports a tacho motor can be plugged into"""
    A = "ev3-ports:outA"
    B = "ev3-ports:outB"
    C = "ev3-ports:outC"
    D = "ev3-ports:outD"

    @classmethod
    def from_name(cls, name: str) -> 'OutPort':
        """
        Look up a port by canonical address, 'outX' or bare letter

        Raises:
            ValueError: if the name does not match any port
        """
        text = name.strip()
        for port in cls:
            if text == port.value:
                return port

        letter = text[3:] if text.lower().startswith('out') else text
        try:
            return cls[letter.upper()]
        except KeyError:
            raise ValueError(f"Unknown output port: {name!r}") from None


class MotorAttribute(Enum):
    """Attribute files exposed by the tacho-motor driver for each device"""
    ADDRESS = "address"              # read-only port identity
    SPEED = "speed"                  # read-only, int16
    SPEED_SP = "speed_sp"            # speed setpoint, int16
    DUTY_CYCLE = "duty_cycle"        # read-only power, int16
    POSITION_SP = "position_sp"      # position setpoint, int16
    COMMAND = "command"              # write-only action trigger
    STOP_COMMAND = "stop_command"    # brake mode
    POSITION = "position"            # int32
    STOP_ACTION = "stop_action"
    STATE = "state"                  # read-only, space separated flags


class MotorCommand(Enum):
    """Tokens accepted by the command attribute"""
    RUN_FOREVER = "run-forever"
    RUN_TO_ABS_POS = "run-to-abs-pos"
    STOP = "stop"
    RESET = "reset"


class StopCommand(Enum):
    """Tokens accepted by the stop_command attribute"""
    BRAKE = "brake"
    COAST = "coast"


class StopAction(Enum):
    """Tokens accepted by the stop_action attribute"""
    HOLD = "hold"
    COAST = "coast"


class MotorState(Enum):
    """State flags documented by the driver"""
    RUNNING = "running"
    RAMPING = "ramping"
    HOLDING = "holding"
    OVERLOADED = "overloaded"
    STALLED = "stalled"


AttributeValue = Union[int, MotorCommand, StopCommand, StopAction]

TOKEN_TYPES = (MotorCommand, StopCommand, StopAction)


def int_range(bits: int) -> range:
    """Range of a signed integer of the given width"""
    return range(-(1 << (bits - 1)), 1 << (bits - 1))


def check_width(value: int, bits: int, name: str) -> int:
    """
    Validate that value fits in a signed integer of the given width

    Raises:
        TypeError: if value is not an int
        ValueError: if value is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value not in int_range(bits):
        valid = int_range(bits)
        raise ValueError(f"{name}={value} out of int{bits} range [{valid.start}, {valid.stop - 1}]")
    return value


class AttributeIO(ABC):
    """Interface for reading and writing device attribute files"""

    @abstractmethod
    def read_string(self, device: str, attribute: MotorAttribute) -> str:
        """Read attribute as text with trailing whitespace removed"""
        pass

    @abstractmethod
    def read_int16(self, device: str, attribute: MotorAttribute) -> int:
        """Read attribute as signed 16-bit integer"""
        pass

    @abstractmethod
    def read_int32(self, device: str, attribute: MotorAttribute) -> int:
        """Read attribute as signed 32-bit integer"""
        pass

    @abstractmethod
    def write(self, device: str, attribute: MotorAttribute, value: AttributeValue):
        """Write an integer or command token to an attribute"""
        pass
