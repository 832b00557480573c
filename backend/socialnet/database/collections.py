"""
Collection names and index definitions of the socialnet database.
"""


class Collections:
    """Collection names in the socialnet database."""
    USERS = "users"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", 1)], "unique": True},
        ],
    }
