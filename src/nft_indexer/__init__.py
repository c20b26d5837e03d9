"""Asynchronous client for the NFT indexer API."""

from nft_indexer.client import IndexerClient
from nft_indexer.exceptions import (
    IndexerError,
    IndexerEncodeError,
    IndexerTransportError,
    IndexerTimeoutError,
    IndexerStatusError,
    IndexerDecodeError,
)
from nft_indexer.models import (
    AssetAttributes,
    AssetInfo,
    ArtworkMetadata,
    Geolocation,
    IndexAssetRequest,
    LocationInformation,
    Medium,
    NFTQuery,
    ProjectMetadata,
    Token,
    VersionedProjectMetadata,
)
from nft_indexer.utils import asset_id, index_id

__all__ = [
    "IndexerClient",
    "IndexerError",
    "IndexerEncodeError",
    "IndexerTransportError",
    "IndexerTimeoutError",
    "IndexerStatusError",
    "IndexerDecodeError",
    "AssetAttributes",
    "AssetInfo",
    "ArtworkMetadata",
    "Geolocation",
    "IndexAssetRequest",
    "LocationInformation",
    "Medium",
    "NFTQuery",
    "ProjectMetadata",
    "Token",
    "VersionedProjectMetadata",
    "asset_id",
    "index_id",
]
