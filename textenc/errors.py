class TextEncodingError(Exception):
    """Base class for errors raised by textenc."""


class EmptyCorpusError(TextEncodingError):
    def __init__(self, message: str = "cannot fit a vocabulary on an empty corpus"):
        super().__init__(message)


class DegenerateDocumentError(TextEncodingError):
    """Raised when a row cannot be weighted because its document has no tokens."""

    def __init__(self, document_index: int | None = None, message: str | None = None):
        self.document_index = document_index
        if message is None:
            where = f" at index {document_index}" if document_index is not None else ""
            message = f"document{where} has zero tokens; term frequency is undefined"
        super().__init__(message)


class IndexOutOfRangeError(TextEncodingError, IndexError):
    def __init__(self, index: int, dim: int):
        self.index = index
        self.dim = dim
        super().__init__(f"index {index} outside vocabulary range [0, {dim})")
