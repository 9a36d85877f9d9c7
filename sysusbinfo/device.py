#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

import dataclasses

from .types import DevicePath, NamedTuple, Optional, Self


class UsbInfo(NamedTuple):
    """Human readable strings of a USB device. Any of them may be empty"""

    manufacturer: str = ""
    product: str = ""
    serial: str = ""

    def is_empty(self) -> bool:
        return not any(self)


@dataclasses.dataclass
class DeviceInfo:
    """
    Device descriptor as produced by device enumeration.

    Attributes:
        path (str): "<bus>:<device>[:<interface>]" token
        manufacturer (str): manufacturer string (filled by lookup)
        product (str): product string (filled by lookup)
        serial (str): serial number (filled by lookup)
    """

    path: DevicePath
    manufacturer: str = ""
    product: str = ""
    serial: str = ""
    vendor_id: Optional[int] = None
    product_id: Optional[int] = None

    @property
    def usb_info(self) -> UsbInfo:
        return UsbInfo(self.manufacturer, self.product, self.serial)

    def update(self, info: UsbInfo) -> Self:
        self.manufacturer, self.product, self.serial = info
        return self
