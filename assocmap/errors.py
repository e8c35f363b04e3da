"""assocmap error types."""


class KeyNotFound(KeyError):
    """Raised when a lookup reaches the end of the list without a match.

    Attributes:
        key: The key that was looked up.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found: {self.key!r}"
