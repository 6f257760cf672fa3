"""
Pydantic schema definitions for API payloads.

Schemas describe request bodies, stored book records and the response
envelopes returned to clients.
"""
