"""
Pydantic schema definitions for API payloads.

Each record kind (profile, projects, skills, etc.) defines its own
Pydantic models for request and response bodies.  ``*Create`` models
validate incoming records, ``*Update`` models carry partial changes
and ``*Read`` models describe what storage hands back.
"""
