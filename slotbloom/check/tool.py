# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from avrokit import URL, avro_reader, avro_schema, avro_writer, parse_url
from enum import Enum
from typing import Generator, Sequence
import argparse
import json
import logging
from slotbloom.base import add_filter_arguments
from slotbloom.filter import DEFAULT_CAPACITIES, CharMapping, SlotBloomFilter

logger = logging.getLogger(__name__)

SCHEMA = avro_schema(
    {
        "name": "Membership",
        "type": "record",
        "fields": [
            {"name": "key", "type": "string"},
            {"name": "present", "type": "boolean"},
        ],
    }
)


class InputFormat(Enum):
    TEXT = "text"
    JSON = "json"
    AVRO = "avro"

    def __str__(self) -> str:
        return self.value


DEFAULT_INPUT_FORMAT: InputFormat = InputFormat.TEXT
DEFAULT_REPORT_INTERVAL: int = 1000


@dataclass
class CheckToolStats:
    count_added: int = 0
    count_checked: int = 0
    count_present: int = 0
    count_error: int = 0


class CheckTool:
    def name(self) -> str:
        return "check"

    def _record_key(self, record: object) -> str | None:
        if isinstance(record, dict) and isinstance(record.get("key"), (str, bytes)):
            key = record["key"]
            if isinstance(key, bytes):
                key = key.decode("utf-8")
            return key
        return None

    def _error(
        self, stats: CheckToolStats, max_errors: int | None, message: str, *args
    ) -> None:
        logger.error(message, *args)
        stats.count_error += 1
        if max_errors and stats.count_error >= max_errors:
            raise RuntimeError(f"Max errors reached: {max_errors}")

    def load_keys(
        self,
        input_url: URL,
        input_format: InputFormat,
        stats: CheckToolStats | None = None,
        max_errors: int | None = None,
    ) -> Generator[str, None, None]:
        """
        Load keys from the input URL based on the specified format.

        :param input_url: URL to the input file.
        :param input_format: Format of the input file (text, JSON, or Avro).
        :param stats: Optional stats to count malformed records in.
        :param max_errors: Raise once this many malformed records were seen.
        :return: A generator yielding keys from the input file.
        """
        stats = stats if stats is not None else CheckToolStats()
        logger.debug("Loading keys from %s with format %s", input_url, input_format)
        if input_format == InputFormat.TEXT:
            # One key per line, empty lines are empty keys
            with input_url.with_mode("r") as file:
                for line in file:
                    if isinstance(line, bytes):
                        line = line.decode("utf-8")
                    yield line.rstrip("\r\n")
        elif input_format == InputFormat.JSON:
            with input_url.with_mode("r") as file:
                for lineno, line in enumerate(file, start=1):
                    try:
                        key = self._record_key(json.loads(line))
                    except json.JSONDecodeError as e:
                        self._error(
                            stats, max_errors, "Invalid JSON at line %d: %s", lineno, e
                        )
                        continue
                    if key is None:
                        self._error(
                            stats, max_errors, "Missing key at line %d", lineno
                        )
                        continue
                    yield key
        elif input_format == InputFormat.AVRO:
            with avro_reader(input_url.with_mode("rb")) as reader:
                for record in reader:
                    key = self._record_key(record)
                    if key is None:
                        self._error(stats, max_errors, "Missing key in %s", record)
                        continue
                    yield key

    def check(
        self,
        keys_url: URL,
        queries_url: URL,
        output_url: URL,
        capacities: Sequence[int] = DEFAULT_CAPACITIES,
        mapping: CharMapping = CharMapping.ALPHABET,
        input_format: InputFormat = DEFAULT_INPUT_FORMAT,
        lowercase: bool = False,
        report_interval: int = DEFAULT_REPORT_INTERVAL,
        max_errors: int | None = None,
    ) -> CheckToolStats:
        stats = CheckToolStats()
        bloom_filter = SlotBloomFilter(capacities, mapping=mapping)

        logger.info("Adding keys from %s", keys_url)
        for key in self.load_keys(keys_url, input_format, stats, max_errors):
            bloom_filter.add(key.lower() if lowercase else key)
            stats.count_added += 1
        logger.info(
            "Added %d keys to %s (estimated false positive rate %.6f)",
            stats.count_added,
            bloom_filter,
            bloom_filter.false_positive_rate(),
        )

        logger.info("Checking %s -> %s", queries_url, output_url)
        with avro_writer(output_url.with_mode("wb"), SCHEMA) as writer:
            for key in self.load_keys(queries_url, input_format, stats, max_errors):
                if stats.count_checked > 0 and stats.count_checked % report_interval == 0:
                    logger.info("%s", stats)
                present = bloom_filter.contains(key.lower() if lowercase else key)
                writer.append({"key": key, "present": present})
                stats.count_checked += 1
                if present:
                    stats.count_present += 1
        return stats

    def configure(self, subparsers: argparse._SubParsersAction) -> None:
        parser = subparsers.add_parser(
            self.name(), help="Check keys for membership in a Bloom filter"
        )
        parser.add_argument(
            "keys_url",
            help="URL containing keys to add to the filter",
        )
        parser.add_argument(
            "queries_url",
            help="URL containing keys to check",
        )
        parser.add_argument(
            "output_url",
            help="URL to save the membership results",
        )
        parser.add_argument(
            "--input_format",
            type=InputFormat,
            choices=list(InputFormat),
            default=DEFAULT_INPUT_FORMAT,
            help="Format of the keys and queries URLs",
        )
        add_filter_arguments(parser)
        parser.add_argument(
            "--lowercase",
            action="store_true",
            help="Lowercase keys before hashing",
        )
        parser.add_argument(
            "--report_interval",
            type=int,
            default=DEFAULT_REPORT_INTERVAL,
            help="Report progress every N queries",
        )
        parser.add_argument(
            "--max_errors",
            type=int,
            default=None,
            help="Maximum number of malformed records before exiting",
        )

    def run(self, args: argparse.Namespace) -> None:
        stats = self.check(
            keys_url=parse_url(args.keys_url),
            queries_url=parse_url(args.queries_url),
            output_url=parse_url(args.output_url),
            capacities=args.capacities,
            mapping=args.mapping,
            input_format=args.input_format,
            lowercase=args.lowercase,
            report_interval=args.report_interval,
            max_errors=args.max_errors,
        )
        logger.info("%s (done)", stats)
