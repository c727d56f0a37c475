# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from .bloomfilter import (
    DEFAULT_CAPACITIES,
    ConfigurationError,
    Slot,
    SlotBloomFilter,
    is_prime,
)
from .hashing import CharMapping, RollingHash, rolling_hash

__all__ = [
    "DEFAULT_CAPACITIES",
    "CharMapping",
    "ConfigurationError",
    "RollingHash",
    "Slot",
    "SlotBloomFilter",
    "is_prime",
    "rolling_hash",
]
