from .base_object import BaseObject, DEBUG_ENV_VAR, parse_debug_level
from .params import SegmentTreeParams
