"""Errors raised by the data store and its repositories."""


class StoreError(Exception):
    """Base class for data store errors."""
    pass


class NotFoundOrForbidden(StoreError):
    """
    Record is absent or belongs to another user.

    Both cases produce the same error and message.
    """

    def __init__(self, kind: str, record_id: int | None = None):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found")


class UsernameTaken(StoreError):
    """Username is already registered."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username {username} is already registered")


class DriveEmailInUse(StoreError):
    """Drive account email is already linked to a different user."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Drive account {email} is linked to another user")
