#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

import argparse
import logging

from sysusbinfo.cache import DeviceMetadataCache
from sysusbinfo.resolver import DEFAULT_BASE
from sysusbinfo.sysfs import DEVICE_PATH, DirectoryReadError, SysfsEnumerator

log = logging.getLogger(__name__)


def ls(cache, _):
    resolver = cache.resolver
    enumerator = cache.enumerator
    for device_id in enumerator.list_devices():
        numbers = resolver.read_numbers(device_id)
        if numbers is None:
            continue
        bus, device = numbers
        info = resolver.read_info(device_id)
        print(f"Bus {bus:03d} Device {device:03d}: {info.manufacturer} {info.product} {info.serial}".rstrip())


def lookup(cache, args):
    print(f"{'Path':16} {'Manufacturer':24} {'Product':32} {'Serial'}")
    for path in args.path:
        info = cache.get(path)
        print(f"{path:16} {info.manufacturer:24} {info.product:32} {info.serial}".rstrip())


def cli():
    parser = argparse.ArgumentParser(prog="sysusbinfo")
    parser.add_argument("--log-level", choices=["debug", "info", "warning", "error"], default="warning")
    parser.add_argument("--root", default=str(DEVICE_PATH), help="USB device hierarchy (default: %(default)s)")
    parser.add_argument("--base", type=int, choices=[10, 16], default=DEFAULT_BASE, help="path number base")
    sub_parsers = parser.add_subparsers(
        title="sub-commands", description="valid sub-commands", help="select one command", required=True, dest="command"
    )
    sub_parsers.add_parser("ls", help="list USB devices")
    lookup = sub_parsers.add_parser("lookup", help="resolve device path(s)")
    lookup.add_argument("path", nargs="+", help='device path(s) like "0003:0007:00"')
    return parser


def run(args):
    cache = DeviceMetadataCache(SysfsEnumerator(args.root), base=args.base)
    if args.command == "ls":
        ls(cache, args)
    elif args.command == "lookup":
        lookup(cache, args)


def main(args=None):
    parser = cli()
    args = parser.parse_args(args=args)
    fmt = "%(threadName)-10s %(asctime)-15s %(levelname)-5s %(name)s: %(message)s"
    logging.basicConfig(level=args.log_level.upper(), format=fmt)
    try:
        run(args)
    except DirectoryReadError as error:
        log.error("%s", error)
        return 1
    except KeyboardInterrupt:
        print("\rCtrl-C pressed. Bailing out")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
