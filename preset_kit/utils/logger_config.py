import logging

class EmojiFormatter(logging.Formatter):
    """
    Log formatter that prefixes each record with an emoji for its level.
    """

    LEVEL_EMOJIS = {
        logging.DEBUG: "🐛",
        logging.INFO: "✅",
        logging.WARNING: "⚠️",
        logging.ERROR: "❌",
        logging.CRITICAL: "🔥",
    }

    def format(self, record):
        s = super().format(record)
        emoji = self.LEVEL_EMOJIS.get(record.levelno, "")
        return f"{emoji} {s}"

def setup_logging(level: str | int = logging.INFO):
    """
    Configures the root logger with the EmojiFormatter on stderr.
    Call once from the entry point (CLI or main.py).

    Args:
        level: A logging level or its name ("DEBUG", "info", ...).
               Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        EmojiFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    # Re-running setup must not stack handlers
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)
