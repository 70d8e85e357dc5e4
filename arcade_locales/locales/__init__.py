"""Locale package for the per-game JSON string tables.

Each ``<game>.json`` maps locale code to message key to display text and is
read via importlib.resources. Keeping this as a real package ensures the
resources are discoverable both locally and when installed.
"""
