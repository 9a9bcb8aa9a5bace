from enum import Enum
from typing import Sequence

Token = str
TokenizedDocument = Sequence[Token]


class Mode(str, Enum):
    COUNT = "count"
    BINARY = "binary"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


class IdfVariant(str, Enum):
    RAW = "raw"  # log(N / df)
    SMOOTH = "smooth"  # log((1 + N) / (1 + df)) + 1

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None
