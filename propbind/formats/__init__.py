# ==============================================
# TOPIC 4: TEXT FORMAT
# ==============================================
#
# This package reads and writes the flat key=value text that
# property maps are stored in. The binder itself never does I/O.
#
# Modules:
# --------
# - properties_file.py  → loads / load / dumps / dump
#
# ==============================================

from .properties_file import dump, dumps, load, loads

__all__ = ["dump", "dumps", "load", "loads"]
