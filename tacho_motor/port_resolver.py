"""Maps output ports to the device directories assigned by the kernel"""
import logging
import os
from typing import Dict, List

from .exceptions import MotorEnvironmentError, PortNotFoundError
from .motor_interface import AttributeIO, MotorAttribute, OutPort

logger = logging.getLogger(__name__)

DEFAULT_ROOT_PATH = "/sys/class/tacho-motor"


class PortResolver:
    """
    Finds the device directory of the motor plugged into a port

    The kernel names device directories in enumeration order, so the
    directory for a port can change after a replug. Every lookup scans the
    root directory again; results are never cached.
    """

    def __init__(self, attribute_io: AttributeIO, root_path: str = DEFAULT_ROOT_PATH):
        self.attribute_io = attribute_io
        self.root_path = root_path

    def _device_dirs(self) -> List[str]:
        if not os.path.isdir(self.root_path):
            raise MotorEnvironmentError(f"There are no motors connected ({self.root_path} not found)")

        try:
            with os.scandir(self.root_path) as entries:
                devices = sorted(entry.path for entry in entries if entry.is_dir())
        except OSError as e:
            raise MotorEnvironmentError(f"Cannot list motors in {self.root_path}: {e}") from e
        if not devices:
            raise MotorEnvironmentError(f"There are no motors connected ({self.root_path} is empty)")
        return devices

    def resolve(self, port: OutPort) -> str:
        """
        Find the device directory for a port

        Args:
            port: Output port the motor is plugged into

        Returns:
            Path of the device directory

        Raises:
            MotorEnvironmentError: root directory missing or empty
            PortNotFoundError: no device reports this port as its address
            AttributeIOError: a device address could not be read
        """
        for device in self._device_dirs():
            address = self.attribute_io.read_string(device, MotorAttribute.ADDRESS)
            if address == port.value:
                logger.debug(f"Resolved {port.value} -> {device}")
                return device

        raise PortNotFoundError(port)

    def discover(self) -> Dict[OutPort, str]:
        """Map every enumerated motor to the port it is plugged into"""
        found = {}
        for device in self._device_dirs():
            address = self.attribute_io.read_string(device, MotorAttribute.ADDRESS)
            try:
                port = OutPort(address)
            except ValueError:
                logger.debug(f"Skipping {device}: unknown address {address!r}")
                continue
            found.setdefault(port, device)

        logger.debug(f"Discovered {len(found)} motor(s) under {self.root_path}")
        return found
