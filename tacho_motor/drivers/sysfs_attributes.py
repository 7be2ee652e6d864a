"""Sysfs attribute file I/O for tacho motors"""
import logging
import os

from ..exceptions import AttributeIOError
from ..motor_interface import AttributeIO, MotorAttribute, AttributeValue, TOKEN_TYPES, int_range

logger = logging.getLogger(__name__)


class SysfsAttributeIO(AttributeIO):
    """
    Reads and writes driver attributes as plain-text files

    Every call opens the attribute file, performs a single read or write
    and closes it again. Nothing is cached between calls.
    """

    def __init__(self, encoding: str = 'ascii'):
        """
        Initialize attribute I/O

        Args:
            encoding: Text encoding of the attribute files
        """
        self.encoding = encoding

    def read_string(self, device: str, attribute: MotorAttribute) -> str:
        path = os.path.join(device, attribute.value)
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                value = f.read().rstrip()
        except (OSError, UnicodeDecodeError) as e:
            raise AttributeIOError(
                f"Failed to read {path}: {e}", attribute=attribute, device=device
            ) from e

        logger.debug(f"read {path} -> {value!r}")
        return value

    def read_int16(self, device: str, attribute: MotorAttribute) -> int:
        return self._read_int(device, attribute, 16)

    def read_int32(self, device: str, attribute: MotorAttribute) -> int:
        return self._read_int(device, attribute, 32)

    def _read_int(self, device: str, attribute: MotorAttribute, bits: int) -> int:
        text = self.read_string(device, attribute)
        try:
            value = int(text.strip())
        except ValueError as e:
            raise AttributeIOError(
                f"Malformed int{bits} in {attribute.value}: {text!r}",
                attribute=attribute, device=device
            ) from e

        if value not in int_range(bits):
            raise AttributeIOError(
                f"Value {value} in {attribute.value} out of int{bits} range",
                attribute=attribute, device=device
            )
        return value

    def write(self, device: str, attribute: MotorAttribute, value: AttributeValue):
        if isinstance(value, TOKEN_TYPES):
            text = value.value
        elif isinstance(value, int) and not isinstance(value, bool):
            text = str(value)
        else:
            raise TypeError(
                f"Cannot write {type(value).__name__} to {attribute.value}; "
                f"expected int or command token"
            )

        path = os.path.join(device, attribute.value)
        # Attribute files are created by the driver, never by us
        if not os.path.isfile(path):
            raise AttributeIOError(
                f"No such attribute file: {path}", attribute=attribute, device=device
            )
        try:
            with open(path, 'w', encoding=self.encoding) as f:
                f.write(text)
        except OSError as e:
            raise AttributeIOError(
                f"Failed to write {text!r} to {path}: {e}", attribute=attribute, device=device
            ) from e

        logger.debug(f"wrote {path} <- {text!r}")
