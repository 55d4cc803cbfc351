from .options import Options, HinterOptions
