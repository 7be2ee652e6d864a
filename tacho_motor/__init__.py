"""Tacho motor control module"""
from .motor_interface import OutPort, MotorAttribute, MotorCommand, StopCommand, StopAction, MotorState
from .exceptions import TachoMotorError, MotorEnvironmentError, PortNotFoundError, AttributeIOError
from .port_resolver import PortResolver
from .motor_controller import TachoMotorController
from .drivers.sysfs_attributes import SysfsAttributeIO
from .factory import create_motor_controller

__all__ = [
    'OutPort',
    'MotorAttribute',
    'MotorCommand',
    'StopCommand',
    'StopAction',
    'MotorState',
    'TachoMotorError',
    'MotorEnvironmentError',
    'PortNotFoundError',
    'AttributeIOError',
    'PortResolver',
    'TachoMotorController',
    'SysfsAttributeIO',
    'create_motor_controller'
]
