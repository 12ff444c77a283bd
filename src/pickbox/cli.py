"""Command-line entry for the pickbox demo."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from pickbox.config import ConfigError, SelectConfig

SAMPLE_OPTIONS = [
    {"value": "red", "label": "Red"},
    {"value": "green", "label": "Green"},
    {"value": "blue", "label": "Blue"},
    {"value": "cyan", "label": "Cyan"},
    {"value": "magenta", "label": "Magenta"},
    {"value": "yellow", "label": "Yellow"},
]


def load_options(path: Path) -> list[Any]:
    """Read a YAML options file.

    The file holds either a list of options (``{value, label}`` mappings or
    plain strings) or a mapping of configuration keys with an ``options``
    list inside.
    """
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"{path}: {exc.strerror}") from exc
    if isinstance(data, dict):
        data = data.get("options")
    if not isinstance(data, list):
        raise ConfigError(f"{path}: expected a list of options")
    return data


def build_config(args: argparse.Namespace) -> SelectConfig:
    raw = load_options(args.options_file) if args.options_file else SAMPLE_OPTIONS
    return SelectConfig.from_mapping(
        {
            "options": raw,
            "name": args.name,
            "multi": args.multi,
            "is_searchable": args.searchable,
        }
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pickbox",
        description="Try a headless combobox in the terminal",
    )
    parser.add_argument("options_file", nargs="?", type=Path, help="YAML file listing the options")
    parser.add_argument("--multi", action="store_true", help="Allow several selections")
    parser.add_argument("--searchable", action="store_true", help="Filter options by typing")
    parser.add_argument("--name", default="pickbox", help="Id root for the input and menu (default: pickbox)")
    parser.add_argument("--label", default="", help="Label shown above the input")
    parser.add_argument("--debug", action="store_true", help="Log engine transitions to stderr")
    return parser


def run(args: argparse.Namespace) -> int:
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    try:
        config = build_config(args)
    except ConfigError as exc:
        print(f"pickbox: {exc}", file=sys.stderr)
        return 2

    from pickbox.ui import PickboxApp

    selected = PickboxApp(config, label=args.label).run()
    for option in selected or ():
        print(option.value)
    return 0
