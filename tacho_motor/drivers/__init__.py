"""Attribute I/O backends"""
from .sysfs_attributes import SysfsAttributeIO

__all__ = ['SysfsAttributeIO']
