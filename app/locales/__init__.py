"""Locale files loaded by catalog.register_catalog()."""
