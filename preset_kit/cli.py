import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from preset_kit.config import Settings, load_settings
from preset_kit.models.rule import AssemblyOptions
from preset_kit.rules.assembler import assemble_rules
from preset_kit.rules.catalog import DEFAULT_CATALOG
from preset_kit.rules.code_rules import assemble_code_rules
from preset_kit.services.preset_loader import PresetParseError, extract_from_file
from preset_kit.utils.logger_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="preset-kit",
        description="Extract instruction text from presets and assemble rule sets.",
    )
    parser.add_argument("--log-level", default=None, help="Overrides PRESET_KIT_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    extract = sub.add_parser("extract", help="Print the instruction text of a preset file")
    extract.add_argument("path", nargs="?", help="Preset JSON file (default: PRESET_KIT_PRESET_FILE)")

    rules = sub.add_parser("rules", help="Print the assembled auxiliary rules")
    rules.add_argument("--degradation", type=float, default=None)
    rules.add_argument(
        "--enable",
        action="append",
        dest="enabled_rules",
        metavar="KEY",
        help="Allow only these rule keys (repeatable)",
    )

    sub.add_parser("code-rules", help="Print the fixed code-layer rules")
    sub.add_parser("list-rules", help="List the rule catalog")
    return parser


def _cmd_extract(args, settings: Settings) -> int:
    path = args.path or settings.preset_file
    if not path:
        logger.error("No preset file given and PRESET_KIT_PRESET_FILE is not set")
        return 2
    try:
        text = extract_from_file(path)
    except PresetParseError as e:
        logger.error(str(e))
        return 1
    if not text:
        logger.warning(f"No usable instruction text found in {path}")
    print(text)
    return 0


def _cmd_rules(args, settings: Settings) -> int:
    degradation = args.degradation if args.degradation is not None else settings.degradation
    enabled = args.enabled_rules if args.enabled_rules is not None else settings.enabled_rules
    print(assemble_rules(AssemblyOptions(degradation=degradation, enabled_rules=enabled)))
    return 0


def _cmd_list_rules(args, settings: Settings) -> int:
    for rule in DEFAULT_CATALOG.list_all():
        state = "on" if rule.enabled else "off"
        print(f"{rule.key}\tweight={rule.weight}\t{state}\t{rule.condition.value}")
    return 0


def _cmd_code_rules(args, settings: Settings) -> int:
    print(assemble_code_rules())
    return 0


COMMANDS = {
    "extract": _cmd_extract,
    "rules": _cmd_rules,
    "code-rules": _cmd_code_rules,
    "list-rules": _cmd_list_rules,
}


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    settings = load_settings()
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or settings.log_level)
    return COMMANDS[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
