#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

import logging
import re

from .device import UsbInfo
from .sysfs import (
    BUS_NUMBER,
    DEVICE_NUMBER,
    MANUFACTURER,
    PRODUCT,
    SERIAL,
    AttributeMissing,
    DeviceDirectoryEnumerator,
    DirectoryReadError,
)
from .types import DevicePath, Optional

# HID paths are formatted as "%04x:%04x:%02x" (bus:device:interface)
DEFAULT_BASE = 16

DIGITS = {
    10: re.compile(r"[+-]?[0-9]+"),
    16: re.compile(r"[+-]?[0-9a-fA-F]+"),
}

log = logging.getLogger(__name__)


class ParseError(ValueError):
    """The device path does not decompose into bus and device numbers"""


def parse_bus_device(path: DevicePath, base: int = DEFAULT_BASE) -> tuple[int, int]:
    """
    Bus and device numbers from a "<bus>:<device>[:...]" path.
    Only the first two segments are used.

    Raises:
        ParseError: if there are less than two segments or one of them is not an integer
    """
    digits = DIGITS[base]
    parts = path.split(":")
    if len(parts) < 2 or not all(digits.fullmatch(part) for part in parts[:2]):
        raise ParseError(f"Could not parse bus/dev from path: {path!r}")
    return int(parts[0], base), int(parts[1], base)


def _read_int(enumerator, device_id, name) -> Optional[int]:
    try:
        return int(enumerator.read_attribute(device_id, name))
    except (AttributeMissing, ValueError):
        return None


def _read_str(enumerator, device_id, name) -> str:
    try:
        return enumerator.read_attribute(device_id, name)
    except AttributeMissing:
        return ""


class Resolver:
    """Finds the device directory matching a bus/device pair and reads its strings"""

    def __init__(self, enumerator: DeviceDirectoryEnumerator, base: int = DEFAULT_BASE):
        self.enumerator = enumerator
        self.base = base

    def read_numbers(self, device_id: str) -> Optional[tuple[int, int]]:
        """Bus and device numbers of a device id (None if any of them is missing or malformed)"""
        bus = _read_int(self.enumerator, device_id, BUS_NUMBER)
        device = _read_int(self.enumerator, device_id, DEVICE_NUMBER)
        if bus is None or device is None:
            return None
        return bus, device

    def find_device(self, bus: int, device: int) -> Optional[str]:
        """First device id with the given bus and device numbers (None if there is none)"""
        for device_id in self.enumerator.list_devices():
            if self.read_numbers(device_id) == (bus, device):
                return device_id

    def read_info(self, device_id: str) -> UsbInfo:
        return UsbInfo(
            manufacturer=_read_str(self.enumerator, device_id, MANUFACTURER),
            product=_read_str(self.enumerator, device_id, PRODUCT),
            serial=_read_str(self.enumerator, device_id, SERIAL),
        )

    def scan(self, bus: int, device: int) -> Optional[UsbInfo]:
        """
        Strings of the device with the given bus and device numbers.
        Returns None when no device matches.

        Raises:
            DirectoryReadError: if the device hierarchy cannot be listed
        """
        device_id = self.find_device(bus, device)
        if device_id is None:
            return None
        return self.read_info(device_id)

    def resolve(self, path: DevicePath) -> UsbInfo:
        """Never fails: any problem yields an empty UsbInfo"""
        try:
            bus, device = parse_bus_device(path, self.base)
        except ParseError as error:
            log.warning("%s", error)
            return UsbInfo()
        try:
            info = self.scan(bus, device)
        except DirectoryReadError as error:
            log.warning("%s", error)
            return UsbInfo()
        if info is None:
            log.debug("No USB device found for bus=%d device=%d (path %r)", bus, device, path)
            return UsbInfo()
        return info
