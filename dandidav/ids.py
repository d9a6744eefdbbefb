"""Validated identifiers for Dandisets and their versions."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Optional


def _is_ascii_digits(s: str) -> bool:
    return s.isascii() and s.isdigit()


class ParseDandisetIdError(ValueError):
    """Raised for a string that is not a valid Dandiset ID."""

    def __init__(self) -> None:
        super().__init__("Dandiset IDs must be six or more decimal digits")


class ParsePublishedVersionIdError(ValueError):
    """Raised for a string that is not a valid published version ID."""

    def __init__(self) -> None:
        super().__init__('Published version IDs must be of the form "N.N.N"')


class ParseVersionIdError(ValueError):
    """Raised for a string that is neither "draft" nor a published version ID."""

    def __init__(self) -> None:
        super().__init__('Version IDs must be "draft" or of the form "N.N.N"')


class DandisetId(str):
    """A Dandiset identifier: six or more ASCII decimal digits."""

    __slots__ = ()

    def __new__(cls, value: str) -> DandisetId:
        if not (len(value) >= 6 and _is_ascii_digits(value)):
            raise ParseDandisetIdError()
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"DandisetId({str(self)!r})"


class PublishedVersionId(str):
    """A published version identifier of the form ``N.N.N``."""

    __slots__ = ()

    def __new__(cls, value: str) -> PublishedVersionId:
        parts = value.split(".")
        if len(parts) != 3 or not all(_is_ascii_digits(p) for p in parts):
            raise ParsePublishedVersionIdError()
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"PublishedVersionId({str(self)!r})"


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class VersionId:
    """A Dandiset version: the draft, or a published version."""

    published: Optional[PublishedVersionId] = None

    def __post_init__(self) -> None:
        if self.published is not None and not isinstance(
            self.published, PublishedVersionId
        ):
            object.__setattr__(self, "published", PublishedVersionId(self.published))

    @classmethod
    def parse(cls, s: str) -> VersionId:
        """Parse "draft" or a published version ID."""
        if s == "draft":
            return cls()
        try:
            return cls(PublishedVersionId(s))
        except ParsePublishedVersionIdError:
            raise ParseVersionIdError() from None

    @classmethod
    def draft(cls) -> VersionId:
        return cls()

    def is_draft(self) -> bool:
        return self.published is None

    def __str__(self) -> str:
        return "draft" if self.published is None else str(self.published)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VersionId):
            return self.published == other.published
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def _key(self) -> tuple[int, str]:
        return (0, "") if self.published is None else (1, str(self.published))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionId):
            return NotImplemented
        return self._key() < other._key()