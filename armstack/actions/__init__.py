"""One module per lifecycle action; each exposes ``handler(args) -> int``."""

ACTION_NAMES = ("up", "down", "restart", "logs", "status", "clean")
