from typing import Optional

from rich.console import Console

__all__ = ["make_console", "log_violation"]

def make_console(**kwargs) -> Console :
    """Console used as the lenient-mode sink; writes to stderr by default.

    The log path column is off by default: it would always point at this
    module rather than at the checked function.
    """
    kwargs.setdefault("stderr", True)
    kwargs.setdefault("log_path", False)
    return Console(**kwargs)

def log_violation(console:Console, message:str, style:Optional[str]=None) :
    # Attribution '[file::callee]' would otherwise be parsed as markup.
    console.log(
        message.rstrip("\n"), style=style, markup=False, emoji=False,
        highlight=False)
