"""
Auth database configuration.
Stores credential records (username and password pairs).
"""


class Collections:
    """Collection names in the auth database."""
    USERS = "users"


class Fields:
    """Credential record field names."""
    USERNAME = "username"
    PASSWORD = "password"
