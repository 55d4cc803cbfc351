from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional, Sequence, Tuple, Union

from .natives import MISSING, Kind, is_kind

__all__ = ["CallSite", "ArgumentSpec"]

class CallSite(NamedTuple) :
    """Where a batch of checks is attributed in error messages."""
    source: Optional[str] = None
    callee: Optional[str] = None

    @property
    def is_set(self) -> bool :
        return self.source is not None and self.callee is not None

    def format(self, details:str) -> str :
        return f"[{self.source}::{self.callee}]\n{details}\n"

    @classmethod
    def coerce(cls, call_site:Union["CallSite", Sequence[str]]) -> "CallSite" :
        if isinstance(call_site, cls) :
            return call_site
        if isinstance(call_site, (str, bytes)) \
                or not isinstance(call_site, Sequence) :
            raise TypeError(f"Call site should be a CallSite or a (source, \
callee) pair, not '{type(call_site).__name__}'")
        return cls(*call_site)

@dataclass(frozen=True)
class ArgumentSpec :
    """An argument value together with the kinds it may be of.

    An empty ``kinds`` tuple only requires the argument to be supplied. The
    literals ``None`` and ``MISSING`` may appear among the kinds to accept
    an argument that is null or was never supplied.
    """
    value :Any
    kinds :Tuple[Kind, ...] = field(default=())

    def __post_init__(self):
        kinds = tuple(self.kinds)
        for kind in kinds :
            if not is_kind(kind) :
                raise TypeError(f"Acceptable kind should be a class, None or \
MISSING, not '{type(kind).__name__}'")
        object.__setattr__(self, "kinds", kinds)

    @classmethod
    def coerce(cls, spec:Union["ArgumentSpec", Sequence]) -> "ArgumentSpec" :
        """Builds a spec from a ``(value, *kinds)`` sequence."""
        if isinstance(spec, cls) :
            return spec
        if isinstance(spec, (str, bytes)) or not isinstance(spec, Sequence) :
            raise TypeError(f"Argument spec should be an ArgumentSpec or a \
(value, *kinds) sequence, not '{type(spec).__name__}'")
        if len(spec) == 0 :
            raise ValueError("Argument spec should at least hold a value")
        return cls(spec[0], tuple(spec[1:]))

    @property
    def required_only(self) -> bool :
        return len(self.kinds) == 0

    def matches(self) -> bool :
        for kind in self.kinds :
            if self.value is None or self.value is MISSING :
                if self.value is kind :
                    return True
            elif type(self.value) is kind :
                return True
        return False
