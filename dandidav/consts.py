"""Program-wide constants."""

from __future__ import annotations

from datetime import timedelta

PACKAGE_NAME = "dandidav"
PACKAGE_VERSION = "0.0.0"

#: The "User-Agent" value sent in outgoing HTTP requests
USER_AGENT = f"{PACKAGE_NAME}/{PACKAGE_VERSION}"

#: The "Server" value returned in all responses
SERVER_VALUE = f"{PACKAGE_NAME}/{PACKAGE_VERSION}"

#: File extensions (case sensitive) for Zarrs, including the leading periods
ZARR_EXTENSIONS = (".zarr", ".ngff")

#: The maximum number of S3 clients cached at once
S3CLIENT_CACHE_SIZE = 8

#: "Content-Type" for HTML responses to GET requests for collections
HTML_CONTENT_TYPE = "text/html; charset=utf-8"

#: "Content-Type" for the stylesheet
CSS_CONTENT_TYPE = "text/css; charset=utf-8"

#: "Content-Type" for virtual dandiset.yaml files
YAML_CONTENT_TYPE = "text/yaml; charset=utf-8"

#: "Content-Type" for blob assets without an encoding format and for Zarr entries
DEFAULT_CONTENT_TYPE = "application/octet-stream"

#: "Content-Type" for PROPFIND XML responses
DAV_XML_CONTENT_TYPE = "text/xml; charset=utf-8"

#: The XML namespace for standard WebDAV elements
DAV_XMLNS = "DAV:"

#: strftime format for timestamps shown in HTML views (after converting to UTC)
HTML_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%SZ"

#: Path components (case insensitive) that are assumed never to exist.
#: Must be kept sorted.
FAST_NOT_EXIST = (".bzr", ".git", ".nols", ".svn")

#: Interval between periodic logging of the Zarr manifest cache's contents
ZARR_MANIFEST_CACHE_DUMP_PERIOD = timedelta(seconds=3600)