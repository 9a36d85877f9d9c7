#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

import collections
import threading

import pytest

from sysusbinfo.sysfs import SysfsEnumerator


def make_device(root, name, busnum=None, devnum=None, **strings):
    path = root / name
    path.mkdir(parents=True)
    if busnum is not None:
        (path / "busnum").write_text(f"{busnum}\n")
    if devnum is not None:
        (path / "devnum").write_text(f"{devnum}\n")
    for key, value in strings.items():
        (path / key).write_text(f"{value}\n")
    return path


class CountingEnumerator(SysfsEnumerator):
    """SysfsEnumerator which keeps track of how many times it touched the filesystem"""

    def __init__(self, root):
        super().__init__(root)
        self.lock = threading.Lock()
        self.list_calls = 0
        self.reads = collections.Counter()

    @property
    def read_calls(self):
        return sum(self.reads.values())

    def list_devices(self):
        with self.lock:
            self.list_calls += 1
        return super().list_devices()

    def read_attribute(self, device_id, name):
        with self.lock:
            self.reads[device_id, name] += 1
        return super().read_attribute(device_id, name)


@pytest.fixture
def usb_root(tmp_path):
    root = tmp_path / "bus" / "usb" / "devices"
    root.mkdir(parents=True)
    make_device(root, "dev1", 1, 2, manufacturer="Linux Foundation", product="2.0 root hub", serial="0000:00:14.0")
    make_device(root, "dev2", 3, 7, manufacturer="Acme", product="Rocket Skates", serial="RS-0042")
    return root


@pytest.fixture
def enumerator(usb_root):
    return CountingEnumerator(usb_root)
