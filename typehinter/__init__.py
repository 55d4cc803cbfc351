from .natives import MISSING, CUSTOM_CLASS_INSTANCE, NATIVES, TypeTable
from .arguments import ArgumentSpec, CallSite
from .errors import (
    TypeHintError, ConfigurationError, MissingArgumentError,
    InvalidArgumentTypeError)
from .options import HinterOptions
from .core import TypeHinter, hinter
from .utils import type_check
