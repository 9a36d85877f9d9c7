#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Process wide USB string cache.

The heart of the library is [`DeviceMetadataCache`][sysusbinfo.cache.DeviceMetadataCache].
Build one at startup and hand it to every place that enumerates devices:

```python
from sysusbinfo import DeviceInfo, DeviceMetadataCache

cache = DeviceMetadataCache()
info = cache.fill(DeviceInfo("0003:0007:00"))
print(info.manufacturer, info.product, info.serial)
```

Every path is scanned at most once per cache. Failed lookups are cached
as empty strings and never retried.
"""

import logging

import fasteners

from .device import DeviceInfo, UsbInfo
from .resolver import DEFAULT_BASE, Resolver
from .sysfs import DeviceDirectoryEnumerator, SysfsEnumerator
from .types import DevicePath, Optional

log = logging.getLogger(__name__)

PLACEHOLDER = UsbInfo()


class MetadataStore:
    """Thread safe mapping of device path to UsbInfo (many readers, one writer)"""

    def __init__(self):
        self._entries: dict[DevicePath, UsbInfo] = {}
        self._lock = fasteners.ReaderWriterLock()

    def __len__(self):
        with self._lock.read_lock():
            return len(self._entries)

    def __contains__(self, path):
        with self._lock.read_lock():
            return path in self._entries

    def lookup(self, path: DevicePath) -> tuple[UsbInfo, bool]:
        with self._lock.read_lock():
            entry = self._entries.get(path)
        if entry is None:
            return PLACEHOLDER, False
        return entry, True

    def reserve(self, path: DevicePath):
        """Mark path as known so that later lookups are served from the cache"""
        with self._lock.write_lock():
            self._entries[path] = PLACEHOLDER

    def publish(self, path: DevicePath, entry: UsbInfo):
        with self._lock.write_lock():
            self._entries[path] = entry

    def snapshot(self) -> dict[DevicePath, UsbInfo]:
        with self._lock.read_lock():
            return dict(self._entries)


class DeviceMetadataCache:
    """
    Resolves USB strings of a device path, scanning the device hierarchy
    only the first time a path is seen.

    A cache hit never scans. Two threads missing the same path at the
    same time may both scan; the last one to publish wins.
    """

    def __init__(self, enumerator: Optional[DeviceDirectoryEnumerator] = None, base: int = DEFAULT_BASE):
        if enumerator is None:
            enumerator = SysfsEnumerator()
        self.store = MetadataStore()
        self.resolver = Resolver(enumerator, base=base)

    def __repr__(self):
        return f"{type(self).__name__}(enumerator={self.resolver.enumerator!r}, size={len(self.store)})"

    @property
    def enumerator(self) -> DeviceDirectoryEnumerator:
        return self.resolver.enumerator

    def get(self, path: DevicePath) -> UsbInfo:
        entry, found = self.store.lookup(path)
        if found:
            return entry
        log.info("Reading bus/dev from path: %s", path)
        self.store.reserve(path)
        entry = self.resolver.resolve(path)
        self.store.publish(path, entry)
        return entry

    def fill(self, info: DeviceInfo) -> DeviceInfo:
        """Overwrite manufacturer, product and serial of info in place"""
        info.update(self.get(info.path))
        return info


def fill_device_info(info: DeviceInfo, cache: DeviceMetadataCache) -> DeviceInfo:
    return cache.fill(info)
