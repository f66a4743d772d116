"""
Pydantic schema definitions for API payloads.

Each domain (users, links) defines its own models for request and
response bodies.  Schemas are separated from the stored records to
decouple API representation from persistence.
"""
