#
# This file is part of the sysusbinfo project
#
# Copyright (c) 2025 The sysusbinfo authors
# Distributed under the GPLv3 license. See LICENSE for more info.

from .cli import main

raise SystemExit(main())
