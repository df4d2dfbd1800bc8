"""
Pydantic schema definitions for API payloads.

Each resource (participants, sessions, operations) defines its own
models for request and response bodies.  Schemas are separated from
the storage layout to decouple API representation from persistence.
"""
