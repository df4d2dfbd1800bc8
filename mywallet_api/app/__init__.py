"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource (participants, sessions, operations) keeps
its schemas, service and router in separate modules under
``schemas``, ``services`` and ``api/endpoints``.
"""

from .main import app  # noqa: F401
