"""Console logging shared by the whole package."""
import os
import sys
import logging

LOGLEVEL = os.environ.get("LOGLEVEL", "INFO").upper()
LOGFORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

console_logger = logging.getLogger()
console_logger.setLevel(LOGLEVEL)

handler = logging.StreamHandler(sys.stdout)
handler.setLevel(LOGLEVEL)
handler.setFormatter(logging.Formatter(LOGFORMAT))
console_logger.addHandler(handler)


def set_debug(debug: bool):
    """Switch the console output between DEBUG and the level given by `LOGLEVEL`."""
    level = logging.DEBUG if debug else LOGLEVEL
    console_logger.setLevel(level)
    handler.setLevel(level)
