"""sidediff — side-by-side rendering of git diff logs."""

__version__ = "0.1.0"
