from typing import Optional


class IndexerError(Exception):
    pass


class IndexerEncodeError(IndexerError):
    """
    Request could not be serialized to JSON
    """

    pass


class IndexerTransportError(IndexerError):
    """
    Request failed before a complete response was read (DNS, connection, TLS, body read)
    """

    url: Optional[str] = None

    def __init__(self, *args, url=None):
        super().__init__(*args)
        self.url = url


class IndexerTimeoutError(IndexerTransportError):
    """
    Indexer did not respond within the configured timeout
    """

    pass


class IndexerStatusError(IndexerError):
    """
    Indexer answered with an unexpected HTTP status
    """

    status: int
    body: str
    url: Optional[str] = None

    def __init__(self, status: int, body: str, url=None):
        super().__init__(
            f"indexer returned status code {status} with message: {body}"
        )
        self.status = status
        self.body = body
        self.url = url


class IndexerDecodeError(IndexerError):
    """
    Response body is not a valid list of assets
    """

    body: str

    def __init__(self, *args, body: str = ""):
        super().__init__(*args)
        self.body = body
