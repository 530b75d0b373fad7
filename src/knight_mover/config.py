"""Defaults for the command line; every value can be overridden by a flag."""

DEFAULT_BOARD_URL = "https://storage.googleapis.com/jobrapido-backend-test/board.json"
DEFAULT_COMMANDS_URL = "https://storage.googleapis.com/jobrapido-backend-test/commands.json"

# Seconds allowed for each document fetch.
DEFAULT_TIMEOUT = 10.0

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
