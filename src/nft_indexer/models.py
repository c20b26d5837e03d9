"""Data models for indexer requests and responses."""

from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    field_validator,
    model_serializer,
)

from nft_indexer.utils import coerce_timestamp


class IndexerModel(BaseModel):
    """
    Base model for indexer payloads.

    Attributes are snake_case, JSON keys are the indexer's camelCase aliases.
    Both names are accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_none_fields(self, handler, info: SerializationInfo):
        # only declared fields are omitted, extra keys keep their nulls
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if getattr(self, name) is None:
                key = field.alias if info.by_alias and field.alias else name
                data.pop(key, None)
        return data

    def to_json(self) -> str:
        """Serialize by alias, leaving out unset optional fields."""
        return self.model_dump_json(by_alias=True)


class Medium(str, Enum):
    """Known asset mediums."""

    IMAGE = "image"
    VIDEO = "video"
    SOFTWARE = "software"
    OTHER = "other"


class Geolocation(IndexerModel):
    """
    Longitude/latitude pair. Ranges are not validated.
    """

    longitude: float = Field(0.0, alias="lon")
    latitude: float = Field(0.0, alias="lat")


class LocationInformation(IndexerModel):
    """
    Claimed location of an artwork and, once verified, its stamped location.
    """

    claimed_location: Geolocation = Field(
        default_factory=Geolocation, alias="claimedLocation"
    )
    stamped_location: Optional[Geolocation] = Field(None, alias="stampedLocation")


class ArtworkMetadata(IndexerModel):
    """
    Artwork provenance from the source.

    Keys outside the known fields are kept as extras so producers sending
    an open metadata bag still round-trip.

    Attributes:
        last_owner: Last owner address.
        is_stamped: Whether the location was stamped.
        location_information: Location history, oldest first.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    last_owner: str = Field("", alias="lastOwner")
    is_stamped: bool = Field(False, alias="isStamped")
    location_information: List[LocationInformation] = Field(
        default_factory=list, alias="locationInformation"
    )


class AssetAttributes(IndexerModel):
    scrollable: bool = False


class ProjectMetadata(IndexerModel):
    """Descriptive metadata of an asset."""

    # Common attributes
    artist_id: str = Field("", alias="artistID")  # artist blockchain address
    artist_name: str = Field("", alias="artistName")
    artist_url: str = Field("", alias="artistURL")
    asset_id: str = Field("", alias="assetID")
    title: str = ""
    description: str = ""
    mime_type: str = Field("", alias="mimeType")
    medium: Union[Medium, str] = ""
    max_edition: int = Field(0, alias="maxEdition")
    base_currency: Optional[str] = Field(None, alias="baseCurrency")
    base_price: Optional[int] = Field(None, alias="basePrice")
    source: str = ""
    source_url: str = Field("", alias="sourceURL")
    preview_url: str = Field("", alias="previewURL")
    thumbnail_url: str = Field("", alias="thumbnailURL")
    gallery_thumbnail_url: str = Field("", alias="galleryThumbnailURL")
    asset_data: str = Field("", alias="assetData")
    asset_url: str = Field("", alias="assetURL")  # permalink

    attributes: Optional[AssetAttributes] = None
    artwork_metadata: Optional[ArtworkMetadata] = Field(None, alias="artworkMetadata")

    last_updated_at: Optional[datetime] = Field(None, alias="lastUpdatedAt")

    # airdrop|fix-price|highest-bid-auction|group-auction
    initial_sale_model: str = Field("", alias="initialSaleModel")

    # deprecated
    original_file_url: str = Field("", alias="originalFileURL")

    @field_validator("last_updated_at", mode="before")
    @classmethod
    def _timestamp(cls, v):
        return coerce_timestamp(v)


class Token(IndexerModel):
    """
    Single on-chain token of an asset.

    Attributes:
        id: Token ID on the contract.
        fungible: Whether the token is fungible.
        blockchain: Blockchain name, e.g. "tezos".
        contract_type: Contract standard, e.g. "fa2" or "erc721".
        minted_at: Mint time.
        contract_address: Token contract address.
        owner: Owner address.
        asset_id: Asset ID the token belongs to.
        index_id: Chain-prefixed index ID.
        balance: Owned balance.
        source: Source tag.
    """

    id: str = ""
    fungible: bool = False
    blockchain: str = ""
    contract_type: str = Field("", alias="contractType")
    minted_at: Optional[datetime] = Field(None, alias="mintedAt")
    contract_address: str = Field("", alias="contractAddress")
    owner: str = ""
    asset_id: str = Field("", alias="assetID")
    index_id: str = Field("", alias="indexID")
    balance: int = 0
    source: str = ""

    @field_validator("minted_at", mode="before")
    @classmethod
    def _timestamp(cls, v):
        return coerce_timestamp(v)


class IndexAssetRequest(IndexerModel):
    """Body of an index (PUT /asset/{assetID}) request."""

    id: Optional[str] = None
    index_id: Optional[str] = Field(None, alias="indexID")
    source: str = ""
    project_metadata: ProjectMetadata = Field(
        default_factory=ProjectMetadata, alias="projectMetadata"
    )
    tokens: List[Token] = Field(default_factory=list)


class VersionedProjectMetadata(IndexerModel):
    """
    Metadata as originally submitted and as it currently stands.
    """

    origin: ProjectMetadata = Field(default_factory=ProjectMetadata)
    latest: ProjectMetadata = Field(default_factory=ProjectMetadata)


class AssetInfo(IndexerModel):
    """Indexed asset returned by the query endpoint."""

    id: str = ""
    index_id: str = Field("", alias="indexID")
    source: str = ""
    project_metadata: VersionedProjectMetadata = Field(
        default_factory=VersionedProjectMetadata, alias="projectMetadata"
    )
    tokens: List[Token] = Field(default_factory=list)


class NFTQuery(IndexerModel):
    ids: List[str]
