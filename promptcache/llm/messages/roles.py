"""
Role constants for conversation messages.
"""

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

ROLES = (ROLE_USER, ROLE_ASSISTANT)
