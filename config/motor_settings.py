"""Tacho motor configuration"""
import os
import logging
from dotenv import load_dotenv

from tacho_motor.motor_interface import OutPort

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()


class ConfigurationError(Exception):
    """Raised when configuration is invalid or incomplete"""
    pass


def validate_motor_config(config: dict) -> dict:
    """Validate motor configuration, raising ConfigurationError on the first bad value"""
    errors = []

    if not str(config.get('root_path', '')).strip():
        errors.append("TACHO_MOTOR_ROOT cannot be empty")

    try:
        OutPort.from_name(str(config.get('default_port', '')))
    except ValueError:
        errors.append(f"TACHO_MOTOR_DEFAULT_PORT '{config.get('default_port')}' is not a known port")

    level = str(config.get('log_level', '')).upper()
    if not isinstance(logging.getLevelName(level), int):
        errors.append(f"TACHO_MOTOR_LOG_LEVEL '{config.get('log_level')}' is not a logging level")

    if errors:
        error_msg = "Motor configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    return config


motor_config = validate_motor_config({
    'root_path': os.getenv('TACHO_MOTOR_ROOT', '/sys/class/tacho-motor'),
    'default_port': os.getenv('TACHO_MOTOR_DEFAULT_PORT', 'ev3-ports:outA'),
    'log_level': os.getenv('TACHO_MOTOR_LOG_LEVEL', 'INFO'),
})
