from .checks import type_check
