"""Error kinds raised by the search engine core."""


class SearchEngineError(Exception):
    """Base class for search engine errors."""


class DocumentStoreFullError(SearchEngineError):
    """Raised when the document store has reached its configured capacity."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Document store is full ({capacity} documents)")


class DocumentNotFoundError(SearchEngineError, KeyError):
    """Raised when a document identifier is not in the store."""

    def __init__(self, doc_id: int) -> None:
        self.doc_id = doc_id
        super().__init__(f"Document {doc_id} not found")

    def __str__(self) -> str:
        return self.args[0]
