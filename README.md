# dandidav

`dandidav` provides building blocks for presenting a DANDI Archive instance as
a read-only WebDAV hierarchy: validated identifiers for Dandisets and their
versions, models of the Archive API's JSON records, parsing of request paths
into locations in the hierarchy, helpers for the `Depth` header, hrefs and
timestamps, and generation of `multistatus` XML replies.

## The hierarchy

```
/                                          root
/dandisets/                                all Dandisets
/dandisets/{id}/                           one Dandiset
/dandisets/{id}/draft/                     the draft version
/dandisets/{id}/latest/                    the most recent published version
/dandisets/{id}/releases/                  published versions
/dandisets/{id}/releases/{N.N.N}/          one published version
/dandisets/{id}/{version}/dandiset.yaml    version metadata as YAML
/dandisets/{id}/{version}/{path}           an asset, folder or Zarr entry
/zarrs/                                    the Zarr manifest tree
/zarrs/{path}                              a path beneath it
```

The segments `dandisets`, `releases`, `draft`, `latest` and `zarrs` match
regardless of ASCII case.  Any component named `.git`, `.svn`, `.bzr` or
`.nols` (in any case) makes the whole path count as nonexistent.

## Modules

- `dandidav.consts` — content types, the `DAV:` namespace, the Zarr file
  extensions, `FAST_NOT_EXIST` and other fixed values.
- `dandidav.ids` — `DandisetId` (six or more ASCII digits),
  `PublishedVersionId` (`N.N.N`) and `VersionId` (`draft` or a published ID,
  via `VersionId.parse()`), raising `ParseDandisetIdError`,
  `ParsePublishedVersionIdError` or `ParseVersionIdError` on bad input.
- `dandidav.models` — `Dandiset`, `DandisetVersion`, `VersionMetadata`
  (metadata dumped as YAML bytes), `FolderEntry`, `AssetFolder`,
  `AssetMetadata`, `BlobAsset`, `ZarrAsset`, `ZarrFolder` and `ZarrEntry`,
  built from the API's JSON by their `from_json()` class methods and
  `asset_from_json()`; also `version_metadata_url()` and `parse_timestamp()`
  (RFC 3339).  An asset record with neither or both of `blob` and `zarr`
  raises `AssetTypeError`.
- `dandidav.davutil` — `VersionSpec` (draft, latest or published),
  `version_path()`, `Href` for percent-encoded links, `FiniteDepth.from_header()`
  and `format_creationdate()` / `format_modifieddate()`.
- `dandidav.davpath` — `split_uri_path()`, `split_components()`,
  `is_fast_not_exist()` and `DavPath.from_components()`, which yields a
  `DavPath` whose `kind` is a `PathKind`.
- `dandidav.xmlprops` — `Tag`, `Property`, `PropValue`, `PropStat`,
  `DavResponse` and `Multistatus.to_xml()`.

## Examples

Parsing a request path:

```python
from dandidav.davpath import DavPath, PathKind, split_uri_path

parts = split_uri_path("/dandisets/000123/draft/foo%2fbar")   # ["dandisets", "000123", "draft", "foo", "bar"]
path = DavPath.from_components(parts)
assert path.kind is PathKind.DANDI_RESOURCE
assert path.path == "foo/bar"
```

`split_uri_path()` returns `None` for a path that is not valid percent-encoded
UTF-8, contains a NUL, or has a component assumed not to exist; `.` components
are dropped and `..` removes the one before it.  `DavPath.from_components()`
returns `None` for a path outside the hierarchy.

Identifiers:

```python
from dandidav.ids import PublishedVersionId, VersionId

VersionId.parse("draft").is_draft()      # True
PublishedVersionId("0.210831.2033")      # accepted
PublishedVersionId("1.2.3.4")            # raises ParsePublishedVersionIdError
```

Hrefs, version paths and the `Depth` header:

```python
from dandidav.davutil import FiniteDepth, Href, InfiniteDepthError, VersionSpec, version_path
from dandidav.ids import DandisetId

Href.from_path("/~cleesh/foo bar/red&green?blue")
# -> "/~cleesh/foo%20bar/red%26green%3Fblue"

version_path(DandisetId("000123"), VersionSpec.published("0.240123.42"))
# -> "dandisets/000123/releases/0.240123.42/"

FiniteDepth.from_header("1")             # FiniteDepth.ONE
try:
    FiniteDepth.from_header(None)
except InfiniteDepthError as e:
    e.status, e.content_type, e.body     # 403 and a DAV:propfind-finite-depth body
```

A header value other than `0`, `1` or `infinity` raises `InvalidDepthError`,
whose `status` is 400.

Writing a `multistatus` reply:

```python
from dandidav.davutil import Href
from dandidav.xmlprops import DavResponse, Multistatus, PropStat, PropValue, Property

reply = Multistatus([
    DavResponse(
        href=Href.from_path("/foo/"),
        propstat=[PropStat(
            prop={
                Property.RESOURCE_TYPE: PropValue.COLLECTION,
                Property.DISPLAY_NAME: PropValue("foo"),
            },
            status="HTTP/1.1 200 OK",
        )],
    ),
])
print(reply.to_xml())
```

Properties are written with the standard ones first, in a fixed order, and the
document is indented by four spaces.

## What the package does not do

The package contains no HTTP server and no client for the Archive API: it
does not listen for requests, fetch Dandisets, assets or Zarr listings, or
follow paginated responses — the caller supplies the JSON records.  It does
not parse `PROPFIND` request bodies, does not turn models into WebDAV items or
collections with their properties, and does not render HTML directory
listings.