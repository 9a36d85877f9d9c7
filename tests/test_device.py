#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

from sysusbinfo.device import DeviceInfo, UsbInfo


def test_usb_info():
    info = UsbInfo()
    assert info == ("", "", "")
    assert info.is_empty()
    assert not UsbInfo(serial="123").is_empty()


def test_device_info_update():
    info = DeviceInfo("0003:0007:00", manufacturer="stale", vendor_id=0x046D, product_id=0xC52B)
    info.update(UsbInfo("Logitech", "USB Receiver", ""))
    assert info.path == "0003:0007:00"
    assert info.manufacturer == "Logitech"
    assert info.product == "USB Receiver"
    assert info.serial == ""
    assert info.vendor_id == 0x046D
    assert info.usb_info == UsbInfo("Logitech", "USB Receiver", "")
