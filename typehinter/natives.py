import datetime
import re
import types
from collections.abc import Mapping
from typing import Any, Iterator, Optional, Tuple, Union

import numpy as np
import torch
from PIL import Image

__all__ = [
    "MISSING", "CUSTOM_CLASS_INSTANCE", "NATIVES", "Kind", "TypeTable", 
    "is_kind"]

class _MissingType :
    """Sentinel for an argument that was never supplied.

    Distinct from ``None``, which stands for an argument explicitly supplied
    with no value.
    """
    _instance = None

    def __new__(cls) :
        if cls._instance is None :
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) :
        return "MISSING"

    def __bool__(self) :
        return False

    def __reduce__(self) :
        return (_MissingType, ())

MISSING = _MissingType()

CUSTOM_CLASS_INSTANCE = "(custom-class instance)"

# Declaration order matters: classification returns the first match.
# ``None`` identities can never be matched by type (sentinels and
# browser-only element classes).
NATIVES: Tuple[Tuple[str, Optional[type]], ...] = (
    ("object",            object),
    ("function",          types.FunctionType),
    ("string",            str),
    ("number",            int),
    ("boolean",           bool),
    ("null",              None),
    ("undefined",         None),
    ("date",              datetime.date),
    ("array",             list),
    ("regexp",            re.Pattern),
    ("error",             Exception),
    ("typeError",         TypeError),
    ("htmlImageElement",  None),
    ("htmlOptionElement", None),
    ("float",             float),
    ("dict",              dict),
    ("tuple",             tuple),
    ("set",               set),
    ("bytes",             bytes),
    ("datetime",          datetime.datetime),
    ("ndarray",           np.ndarray),
    ("tensor",            torch.Tensor),
    ("pilImage",          Image.Image),
)

Kind = Union[type, None, _MissingType]

def is_kind(kind:Any) -> bool :
    return kind is None or kind is MISSING or isinstance(kind, type)

class TypeTable(Mapping) :
    """Ordered, read-only mapping from type names to type identities.

    A table is never mutated once built; ``extended`` returns a new table
    with additional names appended after the existing ones.
    """

    def __init__(self, entries=NATIVES) -> None:
        self._entries = tuple(entries)
        self._index = {}
        for name, identity in self._entries :
            if name in self._index :
                raise ValueError(f"Duplicate type name '{name}'")
            if identity is not None and not isinstance(identity, type) :
                raise TypeError(f"Type identity for '{name}' should be a \
class or None, not '{type(identity).__name__}'")
            self._index[name] = identity

    def __getitem__(self, name:str) -> Optional[type] :
        return self._index[name]

    def __iter__(self) -> Iterator[str] :
        return (name for name, _ in self._entries)

    def __len__(self) -> int :
        return len(self._entries)

    def __repr__(self) :
        return f"{self.__class__.__name__}({', '.join(self)})"

    def extended(self, extra:Mapping) -> "TypeTable" :
        return self.__class__(self._entries + tuple(extra.items()))

    def name_of_type(self, identity:type) -> Optional[str] :
        for name, entry in self._entries :
            if entry is not None and entry is identity :
                return name
        return None

    def classify(self, value:Any) -> str :
        """Returns the type name of ``value``, used for error messages.

        Values whose exact type is absent from the table are reported as
        '(custom-class instance)'.
        """
        if value is None :
            return "null"
        if value is MISSING :
            return "undefined"
        name = self.name_of_type(type(value))
        return CUSTOM_CLASS_INSTANCE if name is None else name

    def kind_name(self, kind:Kind) -> str :
        if kind is None :
            return "null"
        if kind is MISSING :
            return "undefined"
        name = self.name_of_type(kind)
        return CUSTOM_CLASS_INSTANCE if name is None else name
