"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``api`` (HTTP routes), ``services`` (operations),
``repositories`` (storage), ``models`` (domain dataclasses),
``schemas`` (API payloads) and ``core`` (configuration, database and
logging).
"""
