import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from nft_indexer.models import (
    ArtworkMetadata,
    AssetAttributes,
    AssetInfo,
    Geolocation,
    IndexAssetRequest,
    LocationInformation,
    Medium,
    ProjectMetadata,
    Token,
)

CONTRACT = "KT1MeB8Wntrx4fjksZkCWUwmGDQTGs6DsMwp"


@pytest.fixture
def index_request():
    return IndexAssetRequest(
        id=f"{CONTRACT}-1",
        index_id=f"tez-{CONTRACT}-1",
        source="autonomy-postcard",
        project_metadata=ProjectMetadata(
            source="autonomy-postcard",
            asset_id=f"{CONTRACT}-1",
            title="Postcard",
            medium=Medium.IMAGE,
            base_price=100,
            preview_url="https://cdn.test.feralfileassets.com/previews/1/preview.jpeg",
            attributes=AssetAttributes(scrollable=True),
            artwork_metadata=ArtworkMetadata(
                last_owner="tz1owner",
                is_stamped=True,
                location_information=[
                    LocationInformation(
                        claimed_location=Geolocation(longitude=106.7009, latitude=10.7769),
                        stamped_location=Geolocation(longitude=106.70091, latitude=10.77692),
                    ),
                    LocationInformation(
                        claimed_location=Geolocation(longitude=-0.1276, latitude=51.5072)
                    ),
                ],
            ),
            last_updated_at=datetime(2022, 11, 21, 7, 22, 44, 123456, tzinfo=timezone.utc),
        ),
        tokens=[
            Token(
                id="1",
                blockchain="tezos",
                contract_type="fa2",
                minted_at=datetime(2022, 11, 21, 8, 0, tzinfo=timezone(timedelta(hours=7))),
                contract_address=CONTRACT,
                owner="tz1owner",
                balance=1,
            )
        ],
    )


def test_index_request_round_trip(index_request):
    decoded = IndexAssetRequest.model_validate_json(index_request.to_json())
    assert decoded.model_dump() == index_request.model_dump()
    assert decoded.tokens[0].minted_at == index_request.tokens[0].minted_at


def test_index_request_uses_wire_names(index_request):
    data = json.loads(index_request.to_json())
    assert data["indexID"] == f"tez-{CONTRACT}-1"
    assert data["projectMetadata"]["assetID"] == f"{CONTRACT}-1"
    assert data["projectMetadata"]["previewURL"].endswith("preview.jpeg")
    assert data["projectMetadata"]["medium"] == "image"
    location = data["projectMetadata"]["artworkMetadata"]["locationInformation"][0]
    assert location["claimedLocation"] == {"lon": 106.7009, "lat": 10.7769}
    assert data["tokens"][0]["contractType"] == "fa2"


def test_unset_optional_fields_are_omitted():
    data = json.loads(IndexAssetRequest(source="feralfile").to_json())
    assert "id" not in data
    assert "indexID" not in data
    assert "baseCurrency" not in data["projectMetadata"]
    assert "basePrice" not in data["projectMetadata"]
    assert "attributes" not in data["projectMetadata"]
    assert "lastUpdatedAt" not in data["projectMetadata"]
    assert data["projectMetadata"]["title"] == ""


def test_stamped_location_is_optional():
    data = json.loads(
        LocationInformation(claimed_location=Geolocation(longitude=1.5, latitude=2.5)).to_json()
    )
    assert data == {"claimedLocation": {"lon": 1.5, "lat": 2.5}}


def test_geolocation_range_is_not_validated():
    loc = Geolocation(longitude=500.0, latitude=-300.0)
    assert loc.longitude == 500.0
    assert loc.latitude == -300.0


def test_artwork_metadata_keeps_unknown_keys():
    raw = {"lastOwner": "0xabc", "exhibition": "genesis", "edition": {"number": 3}}
    metadata = ArtworkMetadata.model_validate(raw)
    assert metadata.last_owner == "0xabc"
    assert json.loads(metadata.to_json()) == {
        "lastOwner": "0xabc",
        "isStamped": False,
        "locationInformation": [],
        "exhibition": "genesis",
        "edition": {"number": 3},
    }

    with_null = ArtworkMetadata.model_validate({"lastOwner": "a", "note": None})
    decoded = ArtworkMetadata.model_validate_json(with_null.to_json())
    assert decoded.model_extra == {"note": None}


def test_unknown_medium_is_kept_as_string():
    assert ProjectMetadata(medium="3d").medium == "3d"
    assert ProjectMetadata.model_validate({"medium": "video"}).medium == Medium.VIDEO


def test_naive_timestamp_is_utc():
    token = Token(minted_at=datetime(2023, 1, 2, 3, 4, 5))
    assert token.minted_at == datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_nanosecond_and_zero_timestamps():
    token = Token.model_validate(
        {"id": "1", "mintedAt": "2022-11-21T07:22:44.123456789Z"}
    )
    assert token.minted_at == datetime(2022, 11, 21, 7, 22, 44, 123456, tzinfo=timezone.utc)

    metadata = ProjectMetadata.model_validate({"lastUpdatedAt": "0001-01-01T00:00:00Z"})
    assert metadata.last_updated_at is None


def test_invalid_timestamp_is_rejected():
    with pytest.raises(ValidationError):
        Token.model_validate({"mintedAt": "yesterday"})


def test_asset_info_from_indexer_payload():
    payload = {
        "id": f"{CONTRACT}-1",
        "indexID": f"tez-{CONTRACT}-1",
        "source": "feralfile",
        "projectMetadata": {
            "origin": {"title": "First", "artistName": "alice"},
            "latest": {"title": "Renamed", "artistName": "alice"},
        },
        "tokens": [{"id": "1", "blockchain": "tezos", "balance": 2}],
    }
    info = AssetInfo.model_validate(payload)
    assert info.index_id == f"tez-{CONTRACT}-1"
    assert info.project_metadata.origin.title == "First"
    assert info.project_metadata.latest.title == "Renamed"
    assert info.tokens[0].balance == 2
