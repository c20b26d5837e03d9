import re
from datetime import datetime, timezone
from typing import Optional, Union

from nft_indexer.constants import BLOCKCHAIN_ALIASES

_FRACTION = re.compile(r"\.(\d+)")
_ZERO_TIME_PREFIX = "0001-01-01T00:00:00"


def asset_id(contract_address: str, token_id: Union[str, int]) -> str:
    """
    Build an asset ID in the `{contractAddress}-{tokenID}` form.

    Args:
        contract_address: Token contract address
        token_id: On-chain token ID

    Returns:
        Asset ID string
    """
    return f"{contract_address}-{token_id}"


def index_id(blockchain: str, asset_id: str) -> str:
    """
    Build a chain-prefixed index ID in the `{chainTag}-{assetID}` form.

    Args:
        blockchain: Blockchain name ("tezos") or chain tag ("tez")
        asset_id: Asset ID, see `asset_id`

    Returns:
        Index ID string

    Raises:
        ValueError: If the blockchain is not known
    """
    if blockchain in BLOCKCHAIN_ALIASES:
        tag = BLOCKCHAIN_ALIASES[blockchain]
    elif blockchain in BLOCKCHAIN_ALIASES.values():
        tag = blockchain
    else:
        raise ValueError(f"Unknown blockchain: {blockchain}")
    return f"{tag}-{asset_id}"


def coerce_timestamp(value) -> Optional[datetime]:
    """
    Normalize a timestamp coming from a caller or from the indexer.

    Strings are padded or trimmed to microsecond precision, the zero time is treated
    as unset and naive datetimes are taken as UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        if value.startswith(_ZERO_TIME_PREFIX):
            return None
        # fromisoformat before 3.11 only takes 3 or 6 fraction digits
        value = _FRACTION.sub(
            lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1
        )
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        if value.replace(tzinfo=None) == datetime.min:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
    return value
