from enum import Enum, auto

class ScanState(Enum):
    SEEKING_HEADER = auto()
    IN_BODY = auto()
    SEEKING_FOOTER = auto()
    DONE = auto()
