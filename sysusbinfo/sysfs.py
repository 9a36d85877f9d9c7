#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Read only access to the linux sysfs USB device hierarchy.

Each device known to the kernel appears as a directory under
`/sys/bus/usb/devices`. Device directories expose `busnum` and `devnum`
and, optionally, the `manufacturer`, `product` and `serial` strings
read from the device descriptors at enumeration time.

```python
from sysusbinfo.sysfs import SysfsEnumerator

enumerator = SysfsEnumerator()
for device_id in enumerator.list_devices():
    print(device_id, enumerator.read_attribute(device_id, "busnum"))
```
"""

import pathlib

from . import mounts
from .types import Callable, Iterable, Optional, PathLike, Protocol

MOUNT_PATH = mounts.sysfs()
DEVICE_PATH = MOUNT_PATH / "bus/usb/devices"

BUS_NUMBER = "busnum"
DEVICE_NUMBER = "devnum"
MANUFACTURER = "manufacturer"
PRODUCT = "product"
SERIAL = "serial"


class DirectoryReadError(OSError):
    """The device hierarchy root could not be listed"""


class AttributeMissing(LookupError):
    """A device attribute file is absent or unreadable"""


class DeviceDirectoryEnumerator(Protocol):
    """
    Source of device directories and their attributes.

    The sysfs implementation is [`SysfsEnumerator`][sysusbinfo.sysfs.SysfsEnumerator].
    Other platforms may provide their own.
    """

    def list_devices(self) -> Iterable[str]:
        """Device identifiers. Raises DirectoryReadError if they cannot be listed"""
        ...

    def read_attribute(self, device_id: str, name: str) -> str:
        """Stripped attribute text. Raises AttributeMissing if it cannot be read"""
        ...


def read_attr(path: PathLike, decode: Callable = str):
    path = pathlib.Path(path)
    try:
        with path.open() as fobj:
            return decode(fobj.read().strip())
    except (OSError, UnicodeDecodeError) as error:
        raise AttributeMissing(str(path)) from error


class SysfsEnumerator:
    """Device directories under a sysfs like root (defaults to /sys/bus/usb/devices)"""

    def __init__(self, root: Optional[PathLike] = None):
        self.root = DEVICE_PATH if root is None else pathlib.Path(root)

    def __repr__(self):
        return f"{type(self).__name__}(root={str(self.root)!r})"

    def iter_paths(self) -> Iterable[pathlib.Path]:
        try:
            paths = sorted(self.root.iterdir())
        except OSError as error:
            raise DirectoryReadError(error.errno, f"Failed to read {self.root}: {error.strerror}") from error
        return iter(paths)

    def list_devices(self) -> list[str]:
        return [path.name for path in self.iter_paths()]

    def read_attribute(self, device_id: str, name: str) -> str:
        return read_attr(self.root / device_id / name)
