import asyncio
import json
from json import JSONDecodeError
from typing import List, Optional
from urllib.parse import quote

import aiohttp
from loguru import logger
from pydantic import ValidationError

from nft_indexer.constants import (
    API_TOKEN_HEADER,
    ASSET_PATH,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT,
    INDEXER_HEADERS,
    NFT_QUERY_PATH,
)
from nft_indexer.exceptions import (
    IndexerDecodeError,
    IndexerEncodeError,
    IndexerStatusError,
    IndexerTimeoutError,
    IndexerTransportError,
)
from nft_indexer.models import AssetInfo, IndexAssetRequest, IndexerModel, NFTQuery


class IndexerClient(object):
    """
    Client for the NFT indexer API.

    Submits asset metadata for indexing and queries indexed assets. Every call
    is a single request with no retry; failures are raised as IndexerError
    subclasses.

    Example:
        >>> async with IndexerClient("indexer.example.com", "token") as client:
        ...     assets = await client.get_asset_info("tez-KT1...-1")
    """

    def __init__(
        self,
        host: str,
        api_token: str,
        timeout: float = DEFAULT_TIMEOUT,
        scheme: str = DEFAULT_SCHEME,
        session: Optional[aiohttp.ClientSession] = None,
        log_response: bool = False,
    ):
        """
        Initialize indexer client. No network I/O happens here.

        Args:
            host: Indexer host, optionally with port
            api_token: Value of the API-TOKEN header
            timeout: Total request timeout in seconds (default: 5)
            scheme: URL scheme (default: https)
            session: Optional aiohttp session owned by the caller; it must stay
                open while the client is used
            log_response: If True, log raw response bodies at DEBUG level
        """
        self.host = host
        self.api_token = api_token
        self.timeout = timeout
        self.scheme = scheme
        self.log_response = log_response
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    async def __aenter__(self) -> "IndexerClient":
        """Async context manager entry."""
        return await self.startup()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - closes the owned session."""
        await self.shutdown()

    async def startup(self) -> "IndexerClient":
        if not self._owns_session and self._session.closed:
            raise IndexerTransportError("Injected aiohttp session is closed")
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self

    async def shutdown(self):
        """
        Close the HTTP session if it was created by this client.
        """
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    @property
    def headers(self) -> dict:
        headers = {API_TOKEN_HEADER: self.api_token}
        headers.update(INDEXER_HEADERS)
        return headers

    def _url(self, path: str) -> str:
        return f"{self.scheme}://{self.host}{path}"

    @staticmethod
    def _encode(payload: IndexerModel) -> bytes:
        try:
            return payload.to_json().encode("utf-8")
        except (ValueError, TypeError) as e:
            raise IndexerEncodeError(f"Can't serialize {type(payload).__name__}: {e}") from e

    async def _request(self, method: str, path: str, body: bytes) -> str:
        """
        Send one request and read the whole response.

        Args:
            method: HTTP method
            path: Request path on the indexer host
            body: JSON body

        Returns:
            Response text

        Raises:
            IndexerTimeoutError: If the request exceeded the timeout
            IndexerTransportError: If the request failed or the body could not be read
            IndexerStatusError: If the status is not 200
        """
        await self.startup()
        url = self._url(path)
        logger.debug(f"Indexer request {method} {url}")
        try:
            async with self._session.request(
                method, url, data=body, headers=self.headers, timeout=self._timeout
            ) as r:
                raw = await r.read()
                status = r.status
        except asyncio.TimeoutError as e:
            logger.warning(f"Indexer timeout after {self.timeout}s: {method} {url}")
            raise IndexerTimeoutError(
                f"Indexer did not respond within {self.timeout}s", url=url
            ) from e
        except aiohttp.ClientError as e:
            logger.error(f"Indexer request failed {method} {url}: {e}")
            raise IndexerTransportError(str(e), url=url) from e

        text = raw.decode("utf-8", errors="replace")
        if self.log_response:
            logger.debug(f"Indexer response {status} {method} {url}: {text}")
        if status != 200:
            logger.warning(f"Indexer returned {status} for {method} {url}")
            raise IndexerStatusError(status, text, url=url)
        return text

    async def index_asset(self, request: IndexAssetRequest, asset_id: str) -> None:
        """
        Create or update an indexed asset.

        Args:
            request: Asset metadata and tokens
            asset_id: Asset ID, usually `{contractAddress}-{tokenID}`

        Raises:
            IndexerStatusError: If the indexer did not answer with 200
            IndexerTransportError: On network failure or timeout
        """
        body = self._encode(request)
        path = ASSET_PATH.format(asset_id=quote(asset_id, safe=""))
        await self._request("PUT", path, body)

    async def get_asset_info(self, token_id: str) -> List[AssetInfo]:
        """
        Query indexed asset information for a token.

        Args:
            token_id: Token index ID, e.g. "tez-KT1...-1"

        Returns:
            List of AssetInfo returned by the indexer

        Raises:
            IndexerStatusError: If the indexer did not answer with 200
            IndexerDecodeError: If the response is not a list of assets
            IndexerTransportError: On network failure or timeout
        """
        body = self._encode(NFTQuery(ids=[token_id]))
        text = await self._request("POST", NFT_QUERY_PATH, body)

        try:
            content = json.loads(text)
        except JSONDecodeError as e:
            raise IndexerDecodeError(f"Invalid JSON in indexer response: {e}", body=text) from e
        if not isinstance(content, list):
            raise IndexerDecodeError(
                f"Expected a list of assets, got {type(content).__name__}", body=text
            )
        try:
            return [AssetInfo.model_validate(item) for item in content]
        except ValidationError as e:
            raise IndexerDecodeError(f"Invalid asset in indexer response: {e}", body=text) from e
