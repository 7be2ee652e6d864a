"""Errors raised by the tacho motor layer"""
from typing import Optional, Tuple


class TachoMotorError(Exception):
    """Base class for all tacho motor errors"""
    pass


class MotorEnvironmentError(TachoMotorError):
    """Raised when the device root is missing or no motors are enumerated"""
    pass


class PortNotFoundError(TachoMotorError):
    """Raised when no enumerated motor is connected to the requested port"""

    def __init__(self, port):
        self.port = port
        super().__init__(f"No motor is connected to port {getattr(port, 'value', port)}")


class AttributeIOError(TachoMotorError):
    """
    Raised when reading, writing or decoding an attribute file fails

    Attributes:
        attribute: Attribute that failed
        device: Device directory the attribute belongs to
        completed: Attributes already written earlier in the same command
            sequence. These writes are not rolled back.
    """

    def __init__(self, message: str, attribute=None, device: Optional[str] = None,
                 completed: Tuple = ()):
        self.attribute = attribute
        self.device = device
        self.completed = tuple(completed)
        super().__init__(message)

    def with_completed(self, completed: Tuple) -> 'AttributeIOError':
        """Return a copy of this error annotated with the writes that succeeded before it"""
        names = ', '.join(a.value for a in completed) or 'none'
        error = AttributeIOError(
            f"{self} (already written: {names})",
            attribute=self.attribute,
            device=self.device,
            completed=completed
        )
        return error
