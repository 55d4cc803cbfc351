from typing import Optional, Tuple

from .arguments import CallSite

__all__ = [
    "TypeHintError", "ConfigurationError", "MissingArgumentError",
    "InvalidArgumentTypeError"]

class TypeHintError(TypeError) :
    """Base class of every failure reported by a TypeHinter.

    Attributes:
        kind (str): short identifier of the failure.
        details (str): failure description, without attribution.
        call_site (CallSite): attribution of the failing check.
        index (Optional[int]): 1-based position of the offending argument.
    """
    kind = "type-hint"

    def __init__(
            self,
            details:   str,
            call_site: CallSite,
            index:     Optional[int] = None
    ) -> None:
        self.details = details
        self.call_site = call_site
        self.index = index
        super().__init__(self.message)

    @property
    def message(self) -> str :
        return self.call_site.format(self.details)

    def __str__(self) :
        return self.message

    def __reduce__(self) :
        return (self.__class__, (self.details, self.call_site, self.index))

class ConfigurationError(TypeHintError) :
    kind = "configuration"

    def __init__(self, call_site:CallSite) -> None:
        super().__init__(
            "TypeHinter.set_call_site must be called before any checks.",
            call_site
        )

    def __reduce__(self) :
        return (self.__class__, (self.call_site,))

class MissingArgumentError(TypeHintError) :
    kind = "missing-argument"

    def __init__(self, index:int, call_site:CallSite) -> None:
        super().__init__(
            f"Invalid argument passed. Argument *{index}* was not supplied; \
required",
            call_site,
            index
        )

    def __reduce__(self) :
        return (self.__class__, (self.index, self.call_site))

class InvalidArgumentTypeError(TypeHintError) :
    kind = "invalid-argument-type"

    def __init__(
            self,
            index:     int,
            call_site: CallSite,
            actual:    str,
            expected:  Tuple[str, ...]
    ) -> None:
        self.actual = actual
        self.expected = tuple(expected)
        super().__init__(
            f"Invalid argument type. Argument *{index}* is of type: \
_{actual}_\nShould be of type: _{'_, _'.join(self.expected)}_",
            call_site,
            index
        )

    def __reduce__(self) :
        return (
            self.__class__,
            (self.index, self.call_site, self.actual, self.expected)
        )
