"""Helpers for the WebDAV layer: version paths, hrefs, timestamps and Depth."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import quote

from .consts import DAV_XML_CONTENT_TYPE
from .ids import DandisetId, PublishedVersionId

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

#: Response body for PROPFIND requests with a missing or infinite Depth header
INFINITE_DEPTH_RESPONSE = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    '<error xmlns="DAV:">\n'
    "    <propfind-finite-depth />\n"
    "</error>\n"
)


class VersionSpecKind(enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    LATEST = "latest"


@dataclass(frozen=True)
class VersionSpec:
    """A Dandiset version as given in a request path."""

    kind: VersionSpecKind
    version: Optional[PublishedVersionId] = None

    def __post_init__(self) -> None:
        if (self.kind is VersionSpecKind.PUBLISHED) != (self.version is not None):
            raise ValueError("a version ID is required exactly for published versions")
        if self.version is not None and not isinstance(self.version, PublishedVersionId):
            object.__setattr__(self, "version", PublishedVersionId(self.version))

    @classmethod
    def draft(cls) -> VersionSpec:
        return cls(VersionSpecKind.DRAFT)

    @classmethod
    def latest(cls) -> VersionSpec:
        return cls(VersionSpecKind.LATEST)

    @classmethod
    def published(cls, version_id: str) -> VersionSpec:
        return cls(VersionSpecKind.PUBLISHED, PublishedVersionId(version_id))

    @property
    def path_segment(self) -> str:
        """The portion of a version path that names this version."""
        if self.kind is VersionSpecKind.PUBLISHED:
            return f"releases/{self.version}"
        return self.kind.value


class Href(str):
    """A percent-encoded URI or URI path for HTML links and DAV hrefs."""

    __slots__ = ()

    @classmethod
    def from_path(cls, path: str) -> Href:
        """Percent-encode a plain URI path."""
        return cls(quote(path, safe="/"))

    @classmethod
    def from_url(cls, url: str) -> Href:
        """Wrap an already-encoded URL."""
        return cls(str(url))

    def __repr__(self) -> str:
        return f"Href({str(self)!r})"


class InvalidDepthError(ValueError):
    """The "Depth" header has an unrecognised value."""

    status = 400
    content_type = "text/plain; charset=utf-8"
    body = 'Invalid "Depth" header\n'

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid Depth header: {value!r}")


class InfiniteDepthError(ValueError):
    """The "Depth" header is missing or "infinity"."""

    status = 403
    content_type = DAV_XML_CONTENT_TYPE
    body = INFINITE_DEPTH_RESPONSE

    def __init__(self) -> None:
        super().__init__("PROPFIND with infinite depth is not supported")


class FiniteDepth(enum.Enum):
    """A non-infinite WebDAV "Depth" header value."""

    ZERO = 0
    ONE = 1

    @classmethod
    def from_header(cls, value: Optional[str]) -> FiniteDepth:
        """Interpret a "Depth" header value (``None`` if absent)."""
        if value == "0":
            return cls.ZERO
        if value == "1":
            return cls.ONE
        if value is None or value == "infinity":
            raise InfiniteDepthError()
        raise InvalidDepthError(value)


def version_path(dandiset_id: DandisetId, version: VersionSpec) -> str:
    """Return the directory path at which a Dandiset version is served."""
    return f"dandisets/{dandiset_id}/{version.path_segment}/"


def _require_aware(dt: datetime) -> timedelta:
    offset = dt.utcoffset()
    if offset is None:
        raise ValueError("timestamp must be timezone-aware")
    return offset


def format_creationdate(dt: datetime) -> str:
    """Format a timestamp in RFC 3339 form for "creationdate"."""
    offset = _require_aware(dt)
    s = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    if dt.microsecond:
        s += "." + f"{dt.microsecond:06d}".rstrip("0")
    if offset == timedelta(0):
        return s + "Z"
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{s}{sign}{hours:02d}:{minutes:02d}"


def format_modifieddate(dt: datetime) -> str:
    """Format a timestamp in RFC 1123 form (in GMT) for "getlastmodified"."""
    _require_aware(dt)
    u = dt.astimezone(timezone.utc)
    return (
        f"{_WEEKDAYS[u.weekday()]}, {u.day:02d} {_MONTHS[u.month - 1]} {u.year:04d} "
        f"{u.hour:02d}:{u.minute:02d}:{u.second:02d} GMT"
    )