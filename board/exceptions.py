class NotFoundError(Exception):
    """Raised when an operation references a key that is absent from the store."""


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id: int) -> None:
        self.post_id = post_id
        super().__init__(f"No post found for id {post_id}")


class ReadOnlyTransactionError(Exception):
    """Raised when a write is attempted inside a read-only transaction."""
