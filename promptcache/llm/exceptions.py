class CachePrefixMismatchError(Exception):
    """
    The conversation is shorter than the prefix already sent to the provider,
    so the provider cache no longer matches the claimed history.
    """

    def __init__(self, message, cached_count: int = 0, conversation_count: int = 0):
        super().__init__(message)
        self.cached_count = cached_count
        self.conversation_count = conversation_count


class RequestCancelledError(Exception):
    pass
