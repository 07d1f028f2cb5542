class HeapUnderflowError(RuntimeError):
    """Raised when an element is requested from an empty heap."""

    def __init__(self, message: str = "Priority queue underflow"):
        super().__init__(message)


class HeapInvariantError(AssertionError):
    # internal only: an empty slot reached the comparison primitive
    pass
