"""Constants for indexer requests."""

# Request timeout in seconds
DEFAULT_TIMEOUT = 5

DEFAULT_SCHEME = "https"

# Indexer API paths
ASSET_PATH = "/asset/{asset_id}"
NFT_QUERY_PATH = "/v1/nft/query/"

# Headers for indexer API requests
API_TOKEN_HEADER = "API-TOKEN"
INDEXER_HEADERS = {"Content-Type": "application/json"}

# Chain tags used as index ID prefixes
BLOCKCHAIN_ALIASES: dict[str, str] = {
    "ethereum": "eth",
    "tezos": "tez",
    "bitmark": "bmk",
}
