"""Support namespace for small helpers shared by the tidykit modules.

Single-purpose modules (e.g. ``mapping.py``) hold helpers that are not part of
the public API. Import them from their defining modules; nothing is
re-exported here.
"""
