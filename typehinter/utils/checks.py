from functools import wraps
import inspect
from typing import Optional, Tuple, Union

from ..arguments import ArgumentSpec, CallSite
from ..core import TypeHinter, hinter as default_hinter
from ..natives import MISSING, Kind

__all__ = ["type_check"]

def _as_kinds(kinds:Union[Kind, Tuple[Kind, ...]]) -> Tuple[Kind, ...] :
    if isinstance(kinds, tuple) :
        return kinds
    return (kinds,)

def type_check(
        *kinds:Union[Kind, Tuple[Kind, ...]],
        hinter:Optional[TypeHinter]=None
) :
    """Checks the leading parameters of the decorated function.

    Each positional argument of the decorator gives the acceptable kinds of
    the parameter in the same position, either a single kind or a tuple of
    kinds. An empty tuple only requires the parameter to be supplied.
    Parameters left unsupplied (and without default) are checked as
    ``MISSING``. A leading ``self`` or ``cls`` parameter is not checked, so
    the decorator applies to methods as is. Checks are attributed to the
    function's module and qualified name.

    Example:
        @type_check(str, (int, None))
        def create_user(name, age=None):
            ...
    """
    def decorator(func) :
        signature = inspect.signature(func)
        names = [
            name for name, param in signature.parameters.items()
            if param.kind in (
                param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
        ]
        if names and names[0] in ("self", "cls") :
            names = names[1:]
        if len(kinds) > len(names) :
            raise ValueError(f"{func.__qualname__} takes {len(names)} \
positional parameters, {len(kinds)} kinds given")
        specs = [(name, _as_kinds(kind)) for name, kind in zip(names, kinds)]
        call_site = CallSite(func.__module__, func.__qualname__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound = signature.bind_partial(*args, **kwargs)
            bound.apply_defaults()
            (hinter or default_hinter).check(
                *[ArgumentSpec(bound.arguments.get(name, MISSING), kind)
                  for name, kind in specs],
                call_site=call_site
            )
            return func(*args, **kwargs)

        return wrapper
    return decorator
