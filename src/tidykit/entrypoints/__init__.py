"""Entrypoints (inbound adapters) for tidykit.

Expose the helpers to the outside world. Parsing input, reading documents and
printing results happen here; the helpers themselves never do I/O.
"""
