"""Helpers for building fake tacho-motor sysfs trees in tests"""
import os

from tacho_motor.drivers.sysfs_attributes import SysfsAttributeIO

DEFAULT_ATTRIBUTES = {
    'speed': '0',
    'speed_sp': '0',
    'duty_cycle': '0',
    'position_sp': '0',
    'command': '',
    'stop_command': 'coast',
    'position': '0',
    'stop_action': 'coast',
    'state': '',
}


def make_motor(root: str, name: str, address: str, **attributes) -> str:
    """Create a device directory with an address file and default attribute files"""
    device = os.path.join(root, name)
    os.makedirs(device)
    values = dict(DEFAULT_ATTRIBUTES, address=address + '\n')
    values.update(attributes)
    for attribute, content in values.items():
        with open(os.path.join(device, attribute), 'w') as f:
            f.write(content)
    return device


def read_file(device: str, attribute: str) -> str:
    with open(os.path.join(device, attribute)) as f:
        return f.read()


class RecordingAttributeIO(SysfsAttributeIO):
    """Sysfs attribute I/O that records every call in order"""

    def __init__(self):
        super().__init__()
        self.calls = []

    @property
    def writes(self):
        return [(attr.value, value) for op, _, attr, value in self.calls if op == 'write']

    @property
    def write_count(self):
        return len(self.writes)

    def read_string(self, device, attribute):
        self.calls.append(('read', device, attribute, None))
        return super().read_string(device, attribute)

    def write(self, device, attribute, value):
        super().write(device, attribute, value)
        self.calls.append(('write', device, attribute, getattr(value, 'value', value)))
