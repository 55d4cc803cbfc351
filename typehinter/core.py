from typing import Any, Callable, Mapping, Optional, Sequence, Union

from rich.console import Console

from .arguments import ArgumentSpec, CallSite
from .errors import (
    TypeHintError, ConfigurationError, MissingArgumentError,
    InvalidArgumentTypeError)
from .logging import make_console, log_violation
from .natives import MISSING, TypeTable
from .options import HinterOptions

__all__ = ["TypeHinter", "hinter"]

class TypeHinter :
    """Runtime argument-type enforcement.

    A hinter is given a call site (source and callee labels used for
    attribution), then checks argument specs against their acceptable
    kinds::

        hinter.set_call_site("user.py", "create_user")
        hinter.check(("Alice", str), (age, int, None))

    Failures are raised in strict mode. Otherwise they are logged to the
    console and the remaining specs are still checked.

    Args:
        enabled (bool): whether checks run at all.
        strict (bool): raise on failure rather than log it.
        extra_types (Mapping[str, type], optional): named classes appended
            to the native table, for readable names in messages.
        console (Console, optional): lenient-mode sink, stderr by default.
        on_error (Callable, optional): called with every failure before it
            is raised or logged.
        log_style (str, optional): rich style of logged failures.
    """

    def __init__(
            self,
            enabled:     bool                                  = True,
            strict:      bool                                  = True,
            extra_types: Optional[Mapping[str, type]]          = None,
            console:     Optional[Console]                     = None,
            on_error:    Optional[Callable[[TypeHintError], Any]] = None,
            log_style:   Optional[str]                         = "bold yellow",
    ) -> None:
        self.enabled = bool(enabled)
        self._strict = bool(strict)
        self.table = TypeTable()
        if extra_types :
            self.table = self.table.extended(extra_types)
        self.console = console if console is not None else make_console()
        self.on_error = on_error
        self.log_style = log_style
        self.call_site = CallSite()

    def __repr__(self) :
        return (f"{self.__class__.__name__}(enabled={self.enabled}, "
                f"strict={self._strict}, call_site={tuple(self.call_site)})")

    @classmethod
    def from_options(
            cls, options:Union[HinterOptions, dict, None]=None, **kwargs):
        options = cls._as_options(options)
        return cls(
            enabled=options.enabled,
            strict=options.strict,
            log_style=options.log_style,
            **kwargs
        )

    @staticmethod
    def _as_options(options) -> HinterOptions :
        if isinstance(options, HinterOptions) :
            return options
        elif isinstance(options, dict) :
            return HinterOptions.from_attribute_dict(options)
        elif options is None :
            return HinterOptions()
        else :
            raise ValueError("options should be either HinterOptions, a dict \
or None")

    def configure(self, options:Union[HinterOptions, dict]) :
        options = self._as_options(options)
        self.enabled = options.enabled
        self._strict = options.strict
        self.log_style = options.log_style

    @property
    def options(self) -> HinterOptions :
        return HinterOptions(
            enabled=self.enabled, strict=self._strict,
            log_style=self.log_style)

    # ------------------------------ Switches ------------------------------ #

    def enable(self) :
        self.enabled = True

    def disable(self) :
        self.enabled = False

    def set_strict(self, flag:bool) :
        self._strict = bool(flag)

    @property
    def is_strict(self) -> bool :
        return self._strict

    on = enable
    off = disable
    strict = set_strict

    # ------------------------------ Checking ------------------------------ #

    def set_call_site(self, source:str, callee:str) :
        """Attributes the following checks to ``source`` and ``callee``."""
        self.call_site = CallSite(source, callee)

    benchmark = set_call_site

    def classify(self, value:Any) -> str :
        return self.table.classify(value)

    def check(
            self,
            *specs:    Union[ArgumentSpec, Sequence],
            call_site: Union[CallSite, Sequence[str], None] = None
    ) -> bool :
        """Checks every argument spec against its acceptable kinds.

        Args:
            *specs: ``ArgumentSpec`` objects or ``(value, *kinds)``
                sequences. A spec without kinds only requires the value to
                be supplied, i.e. not ``MISSING``.
            call_site (CallSite, optional): attribution for this call only,
                taking precedence over the one set with ``set_call_site``.

        Returns:
            (bool): False if a failure was logged, True otherwise.

        Raises:
            ConfigurationError: no call site is available (strict mode).
            MissingArgumentError: an argument was not supplied (strict mode).
            InvalidArgumentTypeError: an argument has none of its acceptable
                kinds (strict mode).
            TypeError: a spec or one of its kinds is malformed.
        """
        site = (self.call_site if call_site is None
                else CallSite.coerce(call_site))
        if not site.is_set :
            self._report(ConfigurationError(site))
            return False

        if not self.enabled :
            return True

        valid = True
        for index, spec in enumerate(specs, start=1) :
            error = self._validate(index, ArgumentSpec.coerce(spec), site)
            if error is not None :
                valid = False
                self._report(error)
        return valid

    def _validate(
            self, index:int, spec:ArgumentSpec, site:CallSite
    ) -> Optional[TypeHintError] :
        if spec.required_only :
            if spec.value is MISSING :
                return MissingArgumentError(index, site)
            return None
        if spec.matches() :
            return None
        return InvalidArgumentTypeError(
            index,
            site,
            actual=self.table.classify(spec.value),
            expected=tuple(self.table.kind_name(kind) for kind in spec.kinds)
        )

    def _report(self, error:TypeHintError) :
        if self.on_error is not None :
            self.on_error(error)
        if self._strict :
            raise error
        log_violation(self.console, error.message, style=self.log_style)

hinter = TypeHinter()
