# remote_sme/__init__.py
"""
remote-source-map-explorer package initializer.
Defines package version; the CLI lives in :mod:`remote_sme.cli`.
"""
__version__ = "0.1.0"
