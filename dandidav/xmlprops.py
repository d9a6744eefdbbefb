"""WebDAV properties and rendering of multistatus XML documents."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional, Union

from .consts import DAV_XMLNS
from .davutil import Href

_INDENT = "    "
_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_STANDARD_NAMES = (
    "creationdate",
    "displayname",
    "getcontentlength",
    "getcontenttype",
    "getetag",
    "getlastmodified",
    "resourcetype",
)


def _escape_text(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr(s: str) -> str:
    return _escape_text(s).replace('"', "&quot;").replace("'", "&apos;")


@dataclass
class _Element:
    name: str
    namespace: Optional[str] = None
    text: Optional[str] = None
    children: list[_Element] = field(default_factory=list)

    def render(self, lines: list[str], level: int, default_ns: Optional[str]) -> None:
        indent = _INDENT * level
        start = f"<{self.name}"
        ns = default_ns
        if self.namespace is not None and self.namespace != default_ns:
            start += f' xmlns="{_escape_attr(self.namespace)}"'
            ns = self.namespace
        if self.children:
            lines.append(f"{indent}{start}>")
            for child in self.children:
                child.render(lines, level + 1, ns)
            lines.append(f"{indent}</{self.name}>")
        elif self.text is not None:
            lines.append(f"{indent}{start}>{_escape_text(self.text)}</{self.name}>")
        else:
            lines.append(f"{indent}{start} />")


@dataclass(frozen=True, order=True)
class Tag:
    """An XML element name; the namespace defaults to ``DAV:``."""

    name: str
    namespace: Optional[str] = None

    def __post_init__(self) -> None:
        if self.namespace is None:
            object.__setattr__(self, "namespace", DAV_XMLNS)

    def dav_name(self) -> Optional[str]:
        """The local name if the tag is in the ``DAV:`` namespace."""
        return self.name if self.namespace == DAV_XMLNS else None

    def __str__(self) -> str:
        return f"{{{self.namespace}}}{self.name}"


@functools.total_ordering
@dataclass(frozen=True)
class Property:
    """A WebDAV property, identified by its tag.

    Standard properties sort first, in their defined order; custom properties
    follow, ordered by tag.
    """

    tag: Tag

    CREATION_DATE: ClassVar[Property]
    DISPLAY_NAME: ClassVar[Property]
    GET_CONTENT_LENGTH: ClassVar[Property]
    GET_CONTENT_TYPE: ClassVar[Property]
    GET_ETAG: ClassVar[Property]
    GET_LAST_MODIFIED: ClassVar[Property]
    RESOURCE_TYPE: ClassVar[Property]

    @classmethod
    def from_tag(cls, tag: Tag) -> Property:
        return cls(tag)

    @classmethod
    def iter_standard(cls) -> Iterator[Property]:
        """Iterate over the standard properties in order."""
        return iter(_STANDARD_PROPERTIES)

    @property
    def is_standard(self) -> bool:
        return self.tag.dav_name() in _STANDARD_NAMES

    def _rank(self) -> int:
        name = self.tag.dav_name()
        if name in _STANDARD_NAMES:
            return _STANDARD_NAMES.index(name)
        return len(_STANDARD_NAMES)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return (self._rank(), self.tag) < (other._rank(), other.tag)

    def __str__(self) -> str:
        return str(self.tag)

    def _element(self, value: PropValue) -> _Element:
        namespace = None if self.is_standard else self.tag.namespace
        el = _Element(self.tag.name, namespace=namespace)
        value._fill(el)
        return el


_STANDARD_PROPERTIES = tuple(Property(Tag(name)) for name in _STANDARD_NAMES)
(
    Property.CREATION_DATE,
    Property.DISPLAY_NAME,
    Property.GET_CONTENT_LENGTH,
    Property.GET_CONTENT_TYPE,
    Property.GET_ETAG,
    Property.GET_LAST_MODIFIED,
    Property.RESOURCE_TYPE,
) = _STANDARD_PROPERTIES


@dataclass(frozen=True)
class PropValue:
    """A property value: empty, the collection marker, a string or an integer."""

    value: Union[str, int, None] = None
    collection: bool = False

    EMPTY: ClassVar[PropValue]
    COLLECTION: ClassVar[PropValue]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool):
            raise TypeError("property values must be strings or integers")
        if self.collection and self.value is not None:
            raise ValueError("the collection marker carries no value")

    def _fill(self, el: _Element) -> None:
        if self.collection:
            el.children.append(_Element("collection"))
        elif self.value is not None:
            el.text = str(self.value)


PropValue.EMPTY = PropValue()
PropValue.COLLECTION = PropValue(collection=True)


@dataclass
class PropStat:
    prop: dict[Property, PropValue]
    status: str

    def _element(self) -> _Element:
        props = [k._element(self.prop[k]) for k in sorted(self.prop)]
        return _Element(
            "propstat",
            children=[_Element("prop", children=props), _Element("status", text=self.status)],
        )


@dataclass
class DavResponse:
    href: Href
    propstat: list[PropStat]
    location: Optional[Href] = None

    def _element(self) -> _Element:
        children = [_Element("href", text=str(self.href))]
        children.extend(p._element() for p in self.propstat)
        if self.location is not None:
            children.append(
                _Element("location", children=[_Element("href", text=str(self.location))])
            )
        return _Element("response", children=children)


@dataclass
class Multistatus:
    response: list[DavResponse]

    def to_xml(self) -> str:
        """Render as an indented XML document ending with a newline."""
        root = _Element(
            "multistatus",
            namespace=DAV_XMLNS,
            children=[r._element() for r in self.response],
        )
        lines = [_XML_DECLARATION]
        root.render(lines, 0, None)
        return "\n".join(lines) + "\n"