"""Base class for string enums whose members carry a docstring."""

from enum import StrEnum
from typing import Self


class StrEnumWithDoc(StrEnum):
    """String enum where each member is declared as ``NAME = value, doc``.

    The doc part is optional and stored as the member's ``__doc__``.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj
