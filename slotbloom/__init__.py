# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from .filter import CharMapping, ConfigurationError, SlotBloomFilter
from .check import CheckTool
from .demo import DemoTool

__all__ = [
    "CharMapping",
    "CheckTool",
    "ConfigurationError",
    "DemoTool",
    "SlotBloomFilter",
]
