#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
import argparse
from .base import Tool
from .filter import ConfigurationError
from .check import CheckTool
from .demo import DemoTool

TOOLS: list[Tool] = [
    CheckTool(),
    DemoTool(),
]


def select_tool(tool_name: str):
    for tool in TOOLS:
        if tool.name() == tool_name:
            return tool
    raise ValueError(f"Tool {tool_name} not found.")


def configure_tools(subparsers: argparse._SubParsersAction) -> None:
    for tool in TOOLS:
        tool.configure(subparsers)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="slotbloom")
    parser.add_argument("--debug", action="store_true")
    subparsers = parser.add_subparsers(dest="tool", required=True)
    configure_tools(subparsers)
    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s:%(message)s",
        level=logging.DEBUG if args.debug else logging.INFO,
    )
    try:
        tool = select_tool(args.tool)
        tool.run(args)
    except argparse.ArgumentError as e:
        parser.error(e.message)
    except ConfigurationError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
