#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

import pytest
from conftest import make_device

from sysusbinfo.cli import cli, main


def test_ls(usb_root, capsys):
    make_device(usb_root, "1-1:1.0")
    make_device(usb_root, "1-2", "one", 3, manufacturer="Broken")
    assert main(["--root", str(usb_root), "ls"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Bus 001 Device 002: Linux Foundation 2.0 root hub 0000:00:14.0",
        "Bus 003 Device 007: Acme Rocket Skates RS-0042",
    ]


def test_ls_missing_root(tmp_path, capsys):
    assert main(["--root", str(tmp_path / "missing"), "ls"]) == 1
    assert not capsys.readouterr().out


def test_lookup(usb_root, capsys):
    assert main(["--root", str(usb_root), "lookup", "0003:0007:00", "9:9", "abc"]) == 0
    header, acme, unknown, bad = capsys.readouterr().out.splitlines()
    assert header.split() == ["Path", "Manufacturer", "Product", "Serial"]
    assert acme.split() == ["0003:0007:00", "Acme", "Rocket", "Skates", "RS-0042"]
    assert unknown == "9:9"
    assert bad == "abc"


def test_lookup_decimal(usb_root, capsys):
    make_device(usb_root, "1-10", 1, 10, product="Hub")
    assert main(["--root", str(usb_root), "--base", "10", "lookup", "1:10"]) == 0
    assert capsys.readouterr().out.splitlines()[1].split() == ["1:10", "Hub"]


def test_cli_requires_command():
    with pytest.raises(SystemExit):
        cli().parse_args([])
