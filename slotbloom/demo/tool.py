# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import logging
from dataclasses import dataclass
from typing import Sequence

from slotbloom.base import add_filter_arguments
from slotbloom.filter import DEFAULT_CAPACITIES, CharMapping, SlotBloomFilter

logger = logging.getLogger(__name__)

DEMO_KEYS: tuple[str, ...] = (
    "patrick",
    "cody",
    "vandy",
    "alex",
    "jess",
    "captainjacksparrow",
    "hollowknight",
    "coding",
    "coder",
    "code",
)
DEMO_EXCLUDED_KEY = "loner"


@dataclass
class DemoToolStats:
    count_added: int = 0
    count_found: int = 0
    count_missing: int = 0
    false_positive: bool = False


class DemoTool:
    def name(self) -> str:
        return "demo"

    def demo(
        self,
        capacities: Sequence[int] = DEFAULT_CAPACITIES,
        mapping: CharMapping = CharMapping.ALPHABET,
        keys: Sequence[str] = DEMO_KEYS,
        excluded_key: str = DEMO_EXCLUDED_KEY,
    ) -> DemoToolStats:
        stats = DemoToolStats()
        bloom_filter = SlotBloomFilter(capacities, mapping=mapping)

        for key in keys:
            bloom_filter.add(key)
            stats.count_added += 1

        for key in keys:
            if bloom_filter.contains(key):
                logger.info("The Bloom filter probably contains %s", key)
                stats.count_found += 1
            else:
                # Cannot happen unless add and contains disagree on the hash
                logger.error("An added key returned false: %s", key)
                stats.count_missing += 1

        if bloom_filter.contains(excluded_key):
            logger.warning("Bloom filter returned a false positive for %s", excluded_key)
            stats.false_positive = True
        else:
            logger.info(
                "The key %s definitely does not exist in the Bloom filter",
                excluded_key,
            )

        logger.debug(
            "%s estimated false positive rate: %.6f",
            bloom_filter,
            bloom_filter.false_positive_rate(),
        )
        return stats

    def configure(self, subparsers: argparse._SubParsersAction) -> None:
        parser = subparsers.add_parser(
            self.name(), help="Add sample keys to a filter and query them"
        )
        add_filter_arguments(parser)
        parser.add_argument(
            "--excluded_key",
            default=DEMO_EXCLUDED_KEY,
            help="Key to query without adding it",
        )

    def run(self, args: argparse.Namespace) -> None:
        stats = self.demo(
            capacities=args.capacities,
            mapping=args.mapping,
            excluded_key=args.excluded_key,
        )
        logger.info("%s (done)", stats)
