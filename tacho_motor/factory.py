from typing import Optional

from tacho_motor.drivers.sysfs_attributes import SysfsAttributeIO
from tacho_motor.motor_controller import TachoMotorController
from tacho_motor.port_resolver import PortResolver, DEFAULT_ROOT_PATH


def create_motor_controller(config: Optional[dict] = None) -> TachoMotorController:
    if config is None:
        from config.motor_settings import motor_config
        config = motor_config

    attribute_io = SysfsAttributeIO()
    resolver = PortResolver(attribute_io, root_path=config.get('root_path', DEFAULT_ROOT_PATH))
    return TachoMotorController(resolver, attribute_io)


class TachoMotorFactory:
    @staticmethod
    def create_controller(config: Optional[dict] = None) -> TachoMotorController:
        return create_motor_controller(config)
