__version__ = "1.0.1"

VERSION = f"Defiant v{__version__}"
