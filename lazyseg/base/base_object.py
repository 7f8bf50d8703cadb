import logging
import os
import sys
from abc import ABC

DEBUG_ENV_VAR = "LS_DEBUG"

VERBOSITY_LEVELS = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}


def parse_debug_level(debug_info: str, class_name: str) -> int:
    """Resolves the logging level that applies to `class_name`.

    `debug_info` is a comma separated list whose entries are either a bare
    verbosity digit, applied to every object, or `ClassName:digit`, applied
    only to that class. Later entries override earlier ones.
    """
    level = logging.ERROR
    for debug_element_level in debug_info.split(","):
        debug_element_level = debug_element_level.strip()
        if debug_element_level == "":
            continue
        split_debug_element_level = debug_element_level.split(":")
        if len(split_debug_element_level) == 2:
            element_name, verbosity_str = split_debug_element_level
            if element_name != class_name or not verbosity_str.isnumeric():
                continue
            verbosity = int(verbosity_str)

        elif len(split_debug_element_level) == 1 and split_debug_element_level[0].isnumeric():
            verbosity = int(split_debug_element_level[0])

        else:
            logging.getLogger(__name__).warning(f"incorrect debug specification {debug_element_level}")
            continue

        level = VERBOSITY_LEVELS[min(verbosity, max(VERBOSITY_LEVELS))]
    return level


class BaseObject(ABC):
    def __init__(self):
        self.log: logging.Logger = logging.getLogger(self.__class__.__name__)
        if not self.log.hasHandlers():
            handler = logging.StreamHandler(stream=sys.stdout)
            handler.setFormatter(logging.Formatter('%(asctime)s %(module)-20s %(levelname)-5s %(message)s'))
            self.log.addHandler(handler)
        self.log.setLevel(self._get_debug_level())

    def _get_debug_level(self) -> int:
        return parse_debug_level(os.getenv(DEBUG_ENV_VAR, "0"), self.__class__.__name__)
