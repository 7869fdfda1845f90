class ProviderError(Exception):
    """An external mod provider could not be queried or returned garbage."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class UsernameTakenError(Exception):
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' already exists")
        self.username = username


class DuplicateRecordError(Exception):
    """A unique field (username, category name, version) is already taken."""
