from dataclasses import MISSING, dataclass, fields
from typing import Optional

__all__ = ["Options", "HinterOptions"]

class Options :
    """Base class of option dataclasses.

    Subclasses are dataclasses declared with ``repr=False``. They get a
    repr that switches to one field per line when it would not fit on a
    single line, and can be built from a plain dict such as the one a
    caller reads from its own settings.
    """

    max_repr_width = 79

    def _items(self):
        return [(field.name, getattr(self, field.name))
                for field in fields(self)]

    def __repr__(self) :
        name = self.__class__.__name__
        items = self._items()
        short = ", ".join(f"{key}={value!r}" for key, value in items)
        if len(name) + len(short) + 2 < self.max_repr_width:
            return f"{name}({short})"
        width = max(len(key) for key, _ in items)
        lines = ",\n".join(
            f"\t{key.ljust(width)} = {value!r}" for key, value in items)
        return f"{name}(\n{lines})"

    @classmethod
    def from_attribute_dict(cls, attr_dict:dict):
        """Builds options from ``attr_dict``, ignoring unknown keys.

        Raises:
            KeyError: a field without default is absent from ``attr_dict``.
        """
        kwargs = {}
        for field in fields(cls):
            if field.name in attr_dict :
                kwargs[field.name] = attr_dict[field.name]
            elif field.default is MISSING and field.default_factory is MISSING:
                raise KeyError(f"Provided 'attr_dict' argument should have a \
'{field.name}' as {cls.__name__} does not provide a default value")
        return cls(**kwargs)

@dataclass(repr=False)
class HinterOptions(Options) :
    """Runtime switches of a TypeHinter.

    Development setups keep the defaults; production ones usually set
    ``strict`` to False (log instead of raise) or ``enabled`` to False.
    """
    enabled   :bool          = True
    strict    :bool          = True
    log_style :Optional[str] = "bold yellow"

    def __post_init__(self):
        self.enabled = bool(self.enabled)
        self.strict = bool(self.strict)
