from .misc import make_console, log_violation
