#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

import functools
from pathlib import Path

from .types import Iterator, NamedTuple, Optional

PROC_PATH = Path("/proc")
MOUNTS_PATH: Path = PROC_PATH / "mounts"
SYSFS_DEFAULT_PATH = Path("/sys")


class MountInfo(NamedTuple):
    dev_type: str
    mount_point: str
    fs_type: str
    attrs: list[str]


def gen_read() -> Iterator[MountInfo]:
    data = MOUNTS_PATH.read_text()
    for line in data.splitlines():
        dev_type, mount_point, fs_type, attrs, *_ = line.split()
        yield MountInfo(dev_type, mount_point, fs_type, attrs.split(","))


@functools.cache
def cache() -> tuple[MountInfo, ...]:
    try:
        return tuple(gen_read())
    except OSError:
        return ()


def get_mount_point(dev_type, fs_type=None) -> Optional[Path]:
    if fs_type is None:
        fs_type = dev_type
    for _dev_type, mount_point, _fs_type, *_ in cache():
        if dev_type == _dev_type and fs_type == _fs_type:
            return Path(mount_point)


def sysfs() -> Path:
    """sysfs mount point. Falls back to /sys when it cannot be found in /proc/mounts"""
    return get_mount_point("sysfs") or SYSFS_DEFAULT_PATH
