"""Shared column sizing for ORM models."""

# Generated ids are 21 chars; caller-supplied ids may be longer
RECORD_ID_LENGTH = 64
