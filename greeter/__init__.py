"""Say hello in English, German, Spanish and French, from code or the command line."""

__version__ = "1.0.0"
__all__ = ["__version__"]