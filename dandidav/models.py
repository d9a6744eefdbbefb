"""Data returned by a DANDI Archive API about Dandisets, versions and assets."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union
from urllib.parse import quote

import yaml

from .ids import DandisetId, VersionId

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(\.\d+)?"
    r"([Zz]|[+-]\d{2}:\d{2})"
)


def parse_timestamp(s: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime."""
    m = _RFC3339.fullmatch(s)
    if m is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {s!r}")
    year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
    frac, offset = m.group(7), m.group(8)
    micro = int(frac[1:7].ljust(6, "0")) if frac else 0
    if offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise ValueError(f"invalid UTC offset in timestamp: {s!r}")
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)


def _api_url(base: str, *segments: str) -> str:
    path = "/".join(quote(seg, safe="") for seg in segments)
    return f"{base.rstrip('/')}/{path}/"


def version_metadata_url(base: str, dandiset_id: DandisetId, version_id: VersionId) -> str:
    """Return the API URL for the metadata of a Dandiset version."""
    return _api_url(base, "dandisets", str(dandiset_id), "versions", str(version_id))


class AssetTypeError(ValueError):
    """An asset record has neither or both of "blob" and "zarr" set."""

    def __init__(self, asset_id: str, both: bool) -> None:
        self.asset_id = asset_id
        self.both = both
        if both:
            msg = f'asset {asset_id} has both "blob" and "zarr" set'
        else:
            msg = f'asset {asset_id} has neither "blob" nor "zarr" set'
        super().__init__(msg)


@dataclass(frozen=True)
class DandisetVersion:
    version: VersionId
    size: int
    created: datetime
    modified: datetime
    metadata_url: str

    @classmethod
    def from_json(cls, data: dict[str, Any], metadata_url: str) -> DandisetVersion:
        return cls(
            version=VersionId.parse(data["version"]),
            size=int(data["size"]),
            created=parse_timestamp(data["created"]),
            modified=parse_timestamp(data["modified"]),
            metadata_url=metadata_url,
        )


@dataclass(frozen=True)
class Dandiset:
    identifier: DandisetId
    created: datetime
    modified: datetime
    draft_version: DandisetVersion
    most_recent_published_version: Optional[DandisetVersion]

    @classmethod
    def from_json(cls, data: dict[str, Any], base: str) -> Dandiset:
        """Build from an API record; metadata URLs are made from ``base``."""
        identifier = DandisetId(data["identifier"])
        draft = DandisetVersion.from_json(
            data["draft_version"],
            version_metadata_url(base, identifier, VersionId.draft()),
        )
        raw_pub = data.get("most_recent_published_version")
        published = None
        if raw_pub is not None:
            vid = VersionId.parse(raw_pub["version"])
            published = DandisetVersion.from_json(
                raw_pub, version_metadata_url(base, identifier, vid)
            )
        return cls(
            identifier=identifier,
            created=parse_timestamp(data["created"]),
            modified=parse_timestamp(data["modified"]),
            draft_version=draft,
            most_recent_published_version=published,
        )


@dataclass(frozen=True)
class VersionMetadata:
    """A version's metadata serialized as YAML."""

    data: bytes

    @classmethod
    def from_json(cls, data: Any) -> VersionMetadata:
        text = yaml.safe_dump(
            data, sort_keys=False, allow_unicode=True, default_flow_style=False
        )
        return cls(text.encode("utf-8"))

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class AssetFolder:
    """A folder in a version's asset hierarchy; ``path`` ends with a slash."""

    path: str


@dataclass(frozen=True)
class FolderEntry:
    """An item of an asset-paths listing: a folder or an asset."""

    path: str
    asset_id: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> FolderEntry:
        path = data["path"]
        asset = data.get("asset")
        if asset is not None:
            return cls(path=path, asset_id=asset["asset_id"])
        if not path.endswith("/"):
            path += "/"
        return cls(path=path)

    @property
    def is_folder(self) -> bool:
        return self.asset_id is None

    @property
    def folder(self) -> AssetFolder:
        if self.asset_id is not None:
            raise ValueError(f"entry at {self.path!r} is an asset, not a folder")
        return AssetFolder(self.path)


@dataclass(frozen=True)
class AssetMetadata:
    encoding_format: Optional[str] = None
    content_url: tuple[str, ...] = field(default_factory=tuple)
    dandi_etag: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> AssetMetadata:
        return cls(
            encoding_format=data.get("encodingFormat"),
            content_url=tuple(data["contentUrl"]),
            dandi_etag=data["digest"].get("dandi:dandi-etag"),
        )


@dataclass(frozen=True)
class BlobAsset:
    asset_id: str
    blob_id: str
    path: str
    size: int
    created: datetime
    modified: datetime
    metadata: AssetMetadata
    metadata_url: str

    def content_type(self) -> Optional[str]:
        return self.metadata.encoding_format

    def etag(self) -> Optional[str]:
        return self.metadata.dandi_etag


@dataclass(frozen=True)
class ZarrAsset:
    asset_id: str
    zarr_id: str
    path: str
    size: int
    created: datetime
    modified: datetime
    metadata: AssetMetadata
    metadata_url: str


def asset_from_json(data: dict[str, Any], metadata_url: str) -> Union[BlobAsset, ZarrAsset]:
    """Build a blob or Zarr asset from an API asset record."""
    asset_id = data["asset_id"]
    blob, zarr = data.get("blob"), data.get("zarr")
    if blob is not None and zarr is not None:
        raise AssetTypeError(asset_id, both=True)
    if blob is None and zarr is None:
        raise AssetTypeError(asset_id, both=False)
    common = dict(
        asset_id=asset_id,
        path=data["path"],
        size=int(data["size"]),
        created=parse_timestamp(data["created"]),
        modified=parse_timestamp(data["modified"]),
        metadata=AssetMetadata.from_json(data["metadata"]),
        metadata_url=metadata_url,
    )
    if blob is not None:
        return BlobAsset(blob_id=blob, **common)
    return ZarrAsset(zarr_id=zarr, **common)


@dataclass(frozen=True)
class ZarrFolder:
    zarr_path: str
    path: str


@dataclass(frozen=True)
class ZarrEntry:
    zarr_path: str
    path: str
    size: int
    modified: datetime
    etag: str
    url: str