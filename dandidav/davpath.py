"""Parsing of request paths into the resources they name."""

from __future__ import annotations

import bisect
import enum
import string
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional
from urllib.parse import unquote_to_bytes

from .consts import FAST_NOT_EXIST
from .davutil import VersionSpec
from .ids import (
    DandisetId,
    ParseDandisetIdError,
    ParsePublishedVersionIdError,
    PublishedVersionId,
)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(s: str) -> str:
    return s.translate(_ASCII_LOWER)


def _ascii_ieq(s: str, target: str) -> bool:
    return _ascii_lower(s) == target


class PathKind(enum.Enum):
    """The kind of resource a request path points to."""

    ROOT = "root"
    DANDISET_INDEX = "dandiset-index"
    DANDISET = "dandiset"
    DANDISET_RELEASES = "dandiset-releases"
    VERSION = "version"
    DANDISET_YAML = "dandiset-yaml"
    DANDI_RESOURCE = "dandi-resource"
    ZARR_INDEX = "zarr-index"
    ZARR_PATH = "zarr-path"


@dataclass(frozen=True)
class DavPath:
    """A parsed request path.

    ``dandiset_id`` is set for all Dandiset kinds, ``version`` for the
    version-level kinds, and ``path`` for resources beneath a version or
    beneath ``/zarrs/``.
    """

    kind: PathKind
    dandiset_id: Optional[DandisetId] = None
    version: Optional[VersionSpec] = None
    path: Optional[str] = None

    @classmethod
    def from_components(cls, parts: Iterable[str]) -> Optional[DavPath]:
        """Interpret request path components; ``None`` if the path is invalid."""
        it = iter(parts)
        p1 = next(it, None)
        if p1 is None:
            return cls(PathKind.ROOT)
        if _ascii_ieq(p1, "dandisets"):
            did = next(it, None)
            if did is None:
                return cls(PathKind.DANDISET_INDEX)
            try:
                dandiset_id = DandisetId(did)
            except ParseDandisetIdError:
                return None
            p3 = next(it, None)
            if p3 is None:
                return cls(PathKind.DANDISET, dandiset_id=dandiset_id)
            if _ascii_ieq(p3, "releases"):
                v = next(it, None)
                if v is None:
                    return cls(PathKind.DANDISET_RELEASES, dandiset_id=dandiset_id)
                try:
                    version = VersionSpec.published(PublishedVersionId(v))
                except ParsePublishedVersionIdError:
                    return None
            elif _ascii_ieq(p3, "latest"):
                version = VersionSpec.latest()
            elif _ascii_ieq(p3, "draft"):
                version = VersionSpec.draft()
            else:
                return None
            rest = _join(it)
            if rest is None:
                return cls(PathKind.VERSION, dandiset_id=dandiset_id, version=version)
            if rest == "dandiset.yaml":
                return cls(
                    PathKind.DANDISET_YAML, dandiset_id=dandiset_id, version=version
                )
            return cls(
                PathKind.DANDI_RESOURCE,
                dandiset_id=dandiset_id,
                version=version,
                path=rest,
            )
        if _ascii_ieq(p1, "zarrs"):
            rest = _join(it)
            if rest is None:
                return cls(PathKind.ZARR_INDEX)
            return cls(PathKind.ZARR_PATH, path=rest)
        return None


def _join(parts: Iterator[str]) -> Optional[str]:
    joined = "/".join(parts)
    return joined or None


def split_components(s: str) -> Iterator[str]:
    """Yield the pieces of ``s`` separated by runs of slashes, ignoring
    leading and trailing slashes."""
    for piece in s.split("/"):
        if piece:
            yield piece


def is_fast_not_exist(s: str) -> bool:
    """Whether a path component is assumed never to exist."""
    lowered = _ascii_lower(s)
    i = bisect.bisect_left(FAST_NOT_EXIST, lowered)
    return i < len(FAST_NOT_EXIST) and FAST_NOT_EXIST[i] == lowered


def split_uri_path(s: str) -> Optional[list[str]]:
    """Percent-decode a request path and split it into components.

    Single-dot components are dropped and double-dot components remove the
    preceding component.  Returns ``None`` if the path cannot be decoded as
    UTF-8, contains a NUL, or has a component that is assumed not to exist.
    """
    try:
        path = unquote_to_bytes(s).decode("utf-8")
    except UnicodeDecodeError:
        return None
    parts: list[str] = []
    for p in split_components(path):
        if is_fast_not_exist(p):
            return None
        if "\0" in p:
            return None
        if p == ".":
            continue
        if p == "..":
            if parts:
                parts.pop()
            continue
        parts.append(p)
    return parts