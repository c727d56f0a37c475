# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
import math
import operator
from typing import Sequence

from .hashing import (
    DEFAULT_BASE,
    DEFAULT_MAPPING,
    DEFAULT_MODULUS,
    CharMapping,
    RollingHash,
)

logger = logging.getLogger(__name__)

# Distinct primes keep slots from sharing common factors
DEFAULT_CAPACITIES: tuple[int, ...] = (11, 13, 17, 19, 23, 29, 31, 37)


class ConfigurationError(ValueError):
    pass


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    for divisor in range(3, math.isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True


class Slot:
    def __init__(self, capacity: int) -> None:
        """
        :raises ConfigurationError: If capacity is not a positive integer.
        """
        try:
            if isinstance(capacity, bool):
                raise TypeError
            capacity = operator.index(capacity)
        except TypeError:
            raise ConfigurationError(
                f"Slot capacity must be an integer, got {capacity!r}"
            ) from None
        if capacity <= 0:
            raise ConfigurationError(
                f"Slot capacity must be positive, got {capacity}"
            )
        self.capacity: int = capacity
        self.bits: bytearray = bytearray(capacity)

    def __str__(self) -> str:
        return f"Slot(capacity={self.capacity}, count={self.count()})"

    def __len__(self) -> int:
        return self.capacity

    def __getitem__(self, index: int) -> bool:
        return bool(self.bits[index])

    def index(self, hashcode: int) -> int:
        return hashcode % self.capacity

    def set(self, hashcode: int) -> None:
        self.bits[self.index(hashcode)] = 1

    def test(self, hashcode: int) -> bool:
        return bool(self.bits[self.index(hashcode)])

    def count(self) -> int:
        """
        Number of positions marked present.
        """
        return self.bits.count(1)

    def fill_ratio(self) -> float:
        return self.count() / self.capacity


class SlotBloomFilter:
    def __init__(
        self,
        capacities: Sequence[int] = DEFAULT_CAPACITIES,
        base: int = DEFAULT_BASE,
        modulus: int = DEFAULT_MODULUS,
        mapping: CharMapping = DEFAULT_MAPPING,
    ) -> None:
        """
        Initialize a Bloom filter made of one bit array per capacity.

        Each key is hashed once and marks position ``hash % capacity`` in
        every slot.

        :param capacities: Size of each slot, in order. Distinct primes are recommended.
        :param base: Base of the rolling hash.
        :param modulus: Modulus of the rolling hash.
        :param mapping: Character mapping of the rolling hash.
        :raises ConfigurationError: If capacities is empty or holds a non-positive value.
        """
        capacities = list(capacities)
        if not capacities:
            raise ConfigurationError("At least one slot capacity is required")
        slots: list[Slot] = []
        for i, capacity in enumerate(capacities):
            try:
                slots.append(Slot(capacity))
            except ConfigurationError as e:
                raise ConfigurationError(f"{e} (at index {i})") from None
        self._slots: tuple[Slot, ...] = tuple(slots)
        self._hash: RollingHash = RollingHash(base, modulus, mapping)
        logger.debug("Created %s with %s", self, self._hash)

    def __str__(self) -> str:
        return (
            f"SlotBloomFilter(capacities={list(self.capacities)}, "
            f"mapping={self._hash.mapping})"
        )

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    @property
    def slots(self) -> tuple[Slot, ...]:
        return self._slots

    @property
    def capacity_count(self) -> int:
        return len(self._slots)

    @property
    def capacities(self) -> tuple[int, ...]:
        return tuple(slot.capacity for slot in self._slots)

    @property
    def mapping(self) -> CharMapping:
        return self._hash.mapping

    def hash(self, key: str) -> int:
        return self._hash(key)

    def fingerprint(self, key: str) -> tuple[int, ...]:
        """
        Positions a key maps to, one per slot.

        :param key: The key to fingerprint.
        :return: A tuple of indexes in slot order.
        """
        hashcode = self._hash(key)
        return tuple(slot.index(hashcode) for slot in self._slots)

    def add(self, key: str) -> None:
        """
        Add a key to the Bloom filter.

        :param key: The key to add.
        """
        hashcode = self._hash(key)
        for slot in self._slots:
            slot.set(hashcode)

    def contains(self, key: str) -> bool:
        """
        Check if a key is in the Bloom filter.

        :param key: The key to check.
        :return: True if the key is possibly in the filter, False if it is definitely not.
        """
        hashcode = self._hash(key)
        for slot in self._slots:
            if not slot.test(hashcode):
                return False
        return True

    def false_positive_rate(self) -> float:
        """
        Estimate the chance that a key never added is reported as present,
        assuming its positions are independent and uniform in each slot.
        """
        return math.prod(slot.fill_ratio() for slot in self._slots)

    @staticmethod
    def prime_capacities(count: int, start: int = DEFAULT_CAPACITIES[0]) -> list[int]:
        """
        Pick distinct prime slot capacities.

        :param count: Number of slots.
        :param start: Lower bound for the smallest capacity.
        :return: The first ``count`` primes greater than or equal to ``start``.
        """
        if count < 1:
            raise ConfigurationError(f"Slot count must be positive, got {count}")
        primes: list[int] = []
        candidate = max(start, 2)
        while len(primes) < count:
            if is_prime(candidate):
                primes.append(candidate)
            candidate += 1
        return primes
