"""repo-tools — workspace code generation helpers."""

__version__ = "0.1.0"
