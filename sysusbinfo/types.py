#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

import collections.abc
import os
import pathlib
import typing

if hasattr(typing, "Self"):  # 3.11+
    Self = typing.Self
else:
    import typing_extensions

    Self = typing_extensions.Self

Union = typing.Union
Optional = typing.Optional
Protocol = typing.Protocol
NamedTuple = typing.NamedTuple
PathLike = Union[str, pathlib.Path, os.PathLike]

Iterable = collections.abc.Iterable
Iterator = collections.abc.Iterator
Callable = collections.abc.Callable

# "<bus>:<device>[:<interface>]" token identifying a device
DevicePath = str
