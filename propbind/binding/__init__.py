# ==============================================
# TOPIC 3: BINDING
# ==============================================
#
# This package applies raw property maps to a bound object and
# extracts them back, using the registry from Topic 1 and the
# converter from Topic 2.
#
# Modules:
# --------
# - binder.py  → PropertiesBinder, bind()
#
# ==============================================

from .binder import PropertiesBinder, bind

__all__ = ["PropertiesBinder", "bind"]
