# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from enum import Enum

DEFAULT_BASE = 53
DEFAULT_MODULUS = 1_000_000_009


class CharMapping(Enum):
    ALPHABET = "alphabet"
    ORDINAL = "ordinal"

    def __str__(self) -> str:
        return self.value

    def value_of(self, char: str) -> int:
        """
        Map a single character to its numeric contribution.

        ALPHABET maps 'a'..'z' to 1..26. Any other character keeps the same
        shifted value, so uppercase letters and digits contribute zero or a
        negative number rather than being rejected.
        ORDINAL uses the full code point.
        """
        if self is CharMapping.ALPHABET:
            return ord(char) - ord("a") + 1
        return ord(char)


DEFAULT_MAPPING = CharMapping.ALPHABET


class RollingHash:
    def __init__(
        self,
        base: int = DEFAULT_BASE,
        modulus: int = DEFAULT_MODULUS,
        mapping: CharMapping = DEFAULT_MAPPING,
    ) -> None:
        """
        Polynomial rolling hash over the characters of a string.

        :param base: Multiplier for each successive character position.
        :param modulus: Large prime all intermediate values are reduced by.
        :param mapping: How a character is turned into a number.
        """
        if base < 2:
            raise ValueError(f"Hash base must be at least 2, got {base}")
        if modulus < 2:
            raise ValueError(f"Hash modulus must be at least 2, got {modulus}")
        self.base: int = base
        self.modulus: int = modulus
        self.mapping: CharMapping = mapping

    def __str__(self) -> str:
        return (
            f"RollingHash(base={self.base}, modulus={self.modulus}, "
            f"mapping={self.mapping})"
        )

    def __call__(self, key: str) -> int:
        """
        Hash a key into the range [0, modulus).

        :param key: The string to hash.
        :return: The hash value.
        """
        hashcode = 0
        power = 1
        for char in key:
            # Python's % is floored, so negative contributions stay in range
            hashcode = (hashcode + self.mapping.value_of(char) * power) % self.modulus
            power = (power * self.base) % self.modulus
        return hashcode


def rolling_hash(
    key: str,
    base: int = DEFAULT_BASE,
    modulus: int = DEFAULT_MODULUS,
    mapping: CharMapping = DEFAULT_MAPPING,
) -> int:
    return RollingHash(base, modulus, mapping)(key)
