# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import pytest
from slotbloom.filter import (
    DEFAULT_CAPACITIES,
    CharMapping,
    ConfigurationError,
    Slot,
    SlotBloomFilter,
    is_prime,
)

NAMES = ["patrick", "cody", "vandy", "alex"]


class Capacity:
    def __init__(self, value: int) -> None:
        self.value = value

    def __index__(self) -> int:
        return self.value


class TestSlot:
    def test_initialized_absent(self):
        slot = Slot(7)
        assert slot.capacity == 7
        assert len(slot) == 7
        assert not any(slot[i] for i in range(7))
        assert slot.count() == 0

    def test_set_reduces_modulo_capacity(self):
        slot = Slot(7)
        slot.set(15)
        assert slot[1] is True
        assert slot.test(8) is True
        assert slot.test(2) is False

    def test_fill_ratio(self):
        slot = Slot(4)
        slot.set(0)
        slot.set(4)
        slot.set(1)
        assert slot.count() == 2
        assert slot.fill_ratio() == 0.5

    def test_str_representation(self):
        slot = Slot(5)
        slot.set(3)
        assert str(slot) == "Slot(capacity=5, count=1)"

    def test_zero_capacity_rejected(self):
        with pytest.raises(ConfigurationError, match="must be positive"):
            Slot(0)

    def test_negative_capacity_rejected(self):
        with pytest.raises(ConfigurationError, match="must be positive"):
            Slot(-1)

    def test_non_integer_capacity_rejected(self):
        with pytest.raises(ConfigurationError, match="must be an integer"):
            Slot(3.0)  # type: ignore[arg-type]
        with pytest.raises(ConfigurationError, match="must be an integer"):
            Slot(True)

    def test_integer_like_capacity(self):
        slot = Slot(Capacity(5))  # type: ignore[arg-type]
        assert slot.capacity == 5
        assert type(slot.capacity) is int
        slot.set(12)
        assert slot[2] is True


class TestSlotBloomFilterConstruction:
    def test_default_initialization(self):
        bf = SlotBloomFilter()
        assert bf.capacities == (11, 13, 17, 19, 23, 29, 31, 37)
        assert bf.capacity_count == 8
        assert len(bf) == 8
        assert bf.mapping is CharMapping.ALPHABET

    def test_custom_initialization(self):
        bf = SlotBloomFilter([3, 5, 7])
        assert bf.capacities == (3, 5, 7)
        assert [len(slot) for slot in bf.slots] == [3, 5, 7]
        assert all(slot.count() == 0 for slot in bf.slots)

    def test_capacities_copied(self):
        capacities = [3, 5]
        bf = SlotBloomFilter(capacities)
        capacities.append(7)
        assert bf.capacities == (3, 5)

    def test_str_representation(self):
        bf = SlotBloomFilter([3, 5], mapping=CharMapping.ORDINAL)
        assert str(bf) == "SlotBloomFilter(capacities=[3, 5], mapping=ordinal)"

    def test_zero_capacity_rejected(self):
        with pytest.raises(ConfigurationError):
            SlotBloomFilter([0])

    def test_empty_capacities_rejected(self):
        with pytest.raises(ConfigurationError):
            SlotBloomFilter([])

    def test_negative_capacity_rejected(self):
        with pytest.raises(ConfigurationError, match="index 1"):
            SlotBloomFilter([11, -13])

    def test_non_integer_capacity_rejected(self):
        with pytest.raises(ConfigurationError):
            SlotBloomFilter([11, 2.5])  # type: ignore[list-item]
        with pytest.raises(ConfigurationError):
            SlotBloomFilter([True])

    def test_integer_like_capacities(self):
        bf = SlotBloomFilter([Capacity(3), 5])  # type: ignore[list-item]
        assert bf.capacities == (3, 5)

    def test_not_iterable(self):
        with pytest.raises(TypeError):
            iter(SlotBloomFilter())

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            SlotBloomFilter([])


class TestSlotBloomFilterMembership:
    def test_add_and_contains_positive(self):
        bf = SlotBloomFilter()
        bf.add("patrick")
        assert bf.contains("patrick") is True
        assert "patrick" in bf

    def test_contains_on_empty_filter(self):
        bf = SlotBloomFilter()
        assert bf.contains("patrick") is False

    def test_scenario(self):
        bf = SlotBloomFilter(DEFAULT_CAPACITIES)
        for name in NAMES:
            bf.add(name)
        for name in NAMES:
            assert bf.contains(name) is True
        assert bf.contains("loner") is False

    def test_duplicate_add(self):
        bf = SlotBloomFilter()
        bf.add("cody")
        once = [bytes(slot.bits) for slot in bf.slots]
        bf.add("cody")
        assert [bytes(slot.bits) for slot in bf.slots] == once
        assert bf.contains("cody") is True

    def test_no_false_negatives(self):
        bf = SlotBloomFilter([2, 3, 5])
        keys = [f"key{i}" for i in range(200)] + ["", "Mixed Case", "ünïcödé"]
        for key in keys:
            bf.add(key)
        for key in keys:
            assert bf.contains(key) is True

    def test_empty_key(self):
        bf = SlotBloomFilter()
        bf.add("")
        assert bf.contains("") is True
        assert bf.fingerprint("") == (0,) * 8

    def test_capacity_one_slot_saturates(self):
        bf = SlotBloomFilter([1])
        bf.add("anything")
        assert bf.contains("something else") is True

    def test_monotonic_fill(self):
        bf = SlotBloomFilter([5, 7, 11])
        counts = [0, 0, 0]
        for key in ["a", "b", "a", "zz", "", "hello"]:
            bf.add(key)
            new_counts = [slot.count() for slot in bf.slots]
            assert all(new >= old for new, old in zip(new_counts, counts))
            counts = new_counts

    def test_negative_membership_path(self):
        bf = SlotBloomFilter(DEFAULT_CAPACITIES)
        for name in NAMES:
            bf.add(name)
        positions = bf.fingerprint("loner")
        assert not bf.slots[0][positions[0]]
        assert bf.contains("loner") is False

    def test_contains_does_not_mutate(self):
        bf = SlotBloomFilter()
        bf.add("alex")
        before = [bytes(slot.bits) for slot in bf.slots]
        bf.contains("vandy")
        bf.contains("alex")
        assert [bytes(slot.bits) for slot in bf.slots] == before

    def test_uppercase_round_trip(self):
        bf = SlotBloomFilter()
        bf.add("Patrick")
        assert bf.contains("Patrick") is True
        assert bf.hash("Patrick") != bf.hash("patrick")

    def test_ordinal_mapping_round_trip(self):
        bf = SlotBloomFilter(mapping=CharMapping.ORDINAL)
        bf.add("CaptainJackSparrow")
        assert bf.contains("CaptainJackSparrow") is True


class TestSlotBloomFilterIntrospection:
    def test_hash_deterministic_across_instances(self):
        assert SlotBloomFilter().hash("vandy") == SlotBloomFilter([3]).hash("vandy")

    def test_fingerprint(self):
        bf = SlotBloomFilter()
        assert bf.fingerprint("patrick") == (7, 3, 3, 12, 18, 10, 26, 19)
        assert bf.fingerprint("loner") == (0, 12, 1, 18, 12, 8, 20, 21)

    def test_add_sets_fingerprint(self):
        bf = SlotBloomFilter()
        bf.add("cody")
        for slot, position in zip(bf.slots, bf.fingerprint("cody")):
            assert slot[position] is True
            assert slot.count() == 1

    def test_false_positive_rate(self):
        bf = SlotBloomFilter([2, 4])
        assert bf.false_positive_rate() == 0.0
        bf.add("a")
        assert bf.false_positive_rate() == pytest.approx(0.5 * 0.25)

    def test_false_positive_rate_saturated(self):
        bf = SlotBloomFilter([1, 1])
        bf.add("")
        assert bf.false_positive_rate() == 1.0


class TestCapacityHelpers:
    def test_is_prime(self):
        assert [n for n in range(20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]
        assert is_prime(1_000_000_009)
        assert not is_prime(1_000_000_007 * 3)

    def test_prime_capacities_default_start(self):
        assert SlotBloomFilter.prime_capacities(8) == list(DEFAULT_CAPACITIES)

    def test_prime_capacities_custom_start(self):
        assert SlotBloomFilter.prime_capacities(3, start=100) == [101, 103, 107]
        assert SlotBloomFilter.prime_capacities(2, start=0) == [2, 3]

    def test_prime_capacities_invalid_count(self):
        with pytest.raises(ConfigurationError):
            SlotBloomFilter.prime_capacities(0)
