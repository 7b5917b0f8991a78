# reg2ps/core/__init__.py
from .exceptions import (
    ConversionError,
    EmptyInput,
    Fatal,
    InvalidDword,
    MalformedSectionHeader,
    MissingEquals,
    Reg2PsError,
    UnknownHive,
    ValueOutsideSection,
)

__all__ = [
    "ConversionError",
    "EmptyInput",
    "Fatal",
    "InvalidDword",
    "MalformedSectionHeader",
    "MissingEquals",
    "Reg2PsError",
    "UnknownHive",
    "ValueOutsideSection",
]
