#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

"""USB manufacturer, product and serial strings from the linux sysfs"""

from .cache import DeviceMetadataCache, MetadataStore, fill_device_info
from .device import DeviceInfo, UsbInfo
from .resolver import ParseError, Resolver, parse_bus_device
from .sysfs import AttributeMissing, DeviceDirectoryEnumerator, DirectoryReadError, SysfsEnumerator

__version__ = "0.1.0"

__all__ = [
    "AttributeMissing",
    "DeviceDirectoryEnumerator",
    "DeviceInfo",
    "DeviceMetadataCache",
    "DirectoryReadError",
    "MetadataStore",
    "ParseError",
    "Resolver",
    "SysfsEnumerator",
    "UsbInfo",
    "fill_device_info",
    "parse_bus_device",
]
