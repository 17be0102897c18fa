"""
Schemas module - Request/Response schemas for API endpoints.

Request bodies (Create/Update) validate what clients may write; Response
schemas describe the rows returned, with related rows embedded under the
relation name.
"""
