"""
Pydantic schema definitions for records and API payloads.

Records (``Word``, ``VocabularyList``) are stored as-is by the record
stores and returned unchanged by the API.  Payload schemas validate
caller input inside the services.
"""
