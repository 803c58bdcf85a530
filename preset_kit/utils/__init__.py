from preset_kit.utils.accessors import get_bool, get_list, get_number, get_str
from preset_kit.utils.logger_config import EmojiFormatter, setup_logging

__all__ = [
    "get_bool",
    "get_list",
    "get_number",
    "get_str",
    "EmojiFormatter",
    "setup_logging",
]
