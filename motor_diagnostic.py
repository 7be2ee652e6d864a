#!/usr/bin/env python3
"""
Tacho Motor Diagnostic Tool
Lists enumerated motors and reads their state

Usage:
    python motor_diagnostic.py          # all connected motors
    python motor_diagnostic.py outB     # single port
    python motor_diagnostic.py default  # TACHO_MOTOR_DEFAULT_PORT
"""

import logging
import sys

from config.motor_settings import motor_config
from tacho_motor import OutPort, TachoMotorError, create_motor_controller


def print_status(status: dict):
    print(f"📍 {status['port']}: {status['device']}")
    print(f"   state='{status['state']}' position={status['position']} "
          f"speed={status['speed']} power={status['power']}")


def main() -> int:
    logging.basicConfig(
        level=motor_config['log_level'].upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("🚀 Tacho Motor Diagnostic Tool")
    print("=" * 50)
    print(f"Root: {motor_config['root_path']}")

    controller = create_motor_controller(motor_config)

    try:
        if len(sys.argv) > 1:
            name = sys.argv[1]
            if name == 'default':
                name = motor_config['default_port']
            port = OutPort.from_name(name)
            print_status(controller.get_status(port))
        else:
            motors = controller.resolver.discover()
            print(f"🔍 Found {len(motors)} motor(s)")
            for port in OutPort:
                if port in motors:
                    print_status(controller.get_status(port))
                else:
                    print(f"⚪ {port.value}: not connected")
    except ValueError as e:
        print(f"❌ {e}")
        return 2
    except TachoMotorError as e:
        print(f"❌ {e}")
        print("💡 Possible issues:")
        print("   - Motor not plugged in")
        print("   - ev3dev tacho-motor driver not loaded")
        print("   - Wrong TACHO_MOTOR_ROOT")
        return 1

    print("=" * 50)
    print("✅ Motor diagnostic completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
