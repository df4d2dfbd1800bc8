"""
Top‑level package for the MyWallet API.

This file makes ``mywallet_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``mywallet_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
