"""Save-data backup manager core: selection state, cheat files, UTF-8 and text layout helpers."""

__version__ = "3.7.5"