import pytest

from dandidav.davutil import Href
from dandidav.xmlprops import (
    DavResponse,
    Multistatus,
    PropStat,
    Property,
    PropValue,
    Tag,
)

EXPECTED_MULTISTATUS = """\
<?xml version="1.0" encoding="UTF-8"?>
<multistatus xmlns="DAV:">
    <response>
        <href>/foo/</href>
        <propstat>
            <prop>
                <displayname>foo</displayname>
                <resourcetype>
                    <collection />
                </resourcetype>
            </prop>
            <status>HTTP/1.1 200 OK</status>
        </propstat>
    </response>
    <response>
        <href>/foo/bar.txt</href>
        <propstat>
            <prop>
                <creationdate>2024-01-28T13:36:54+05:00</creationdate>
                <displayname>bar.txt</displayname>
                <getcontentlength>42</getcontentlength>
                <getcontenttype>text/plain; charset=us-ascii</getcontenttype>
                <getetag>"0123456789abcdef"</getetag>
                <getlastmodified>2024-01-28T13:38:10+05:00</getlastmodified>
                <resourcetype />
            </prop>
            <status>HTTP/1.1 200 OK</status>
        </propstat>
    </response>
    <response>
        <href>/foo/quux.dat</href>
        <propstat>
            <prop>
                <displayname>quux.dat</displayname>
                <getcontentlength>65535</getcontentlength>
                <getcontenttype>application/octet-stream</getcontenttype>
                <getetag>"ABCDEFGHIJKLMNOPQRSTUVWXYZ"</getetag>
                <getlastmodified>2024-01-28T13:39:25+05:00</getlastmodified>
                <resourcetype />
            </prop>
            <status>HTTP/1.1 307 TEMPORARY REDIRECT</status>
        </propstat>
        <location>
            <href>https://www.example.com/data/quux.dat</href>
        </location>
    </response>
</multistatus>
"""


def test_multistatus_to_xml():
    value = Multistatus(
        response=[
            DavResponse(
                href=Href.from_path("/foo/"),
                propstat=[
                    PropStat(
                        prop={
                            Property.RESOURCE_TYPE: PropValue.COLLECTION,
                            Property.DISPLAY_NAME: PropValue("foo"),
                        },
                        status="HTTP/1.1 200 OK",
                    )
                ],
                location=None,
            ),
            DavResponse(
                href=Href.from_path("/foo/bar.txt"),
                propstat=[
                    PropStat(
                        prop={
                            Property.CREATION_DATE: PropValue("2024-01-28T13:36:54+05:00"),
                            Property.DISPLAY_NAME: PropValue("bar.txt"),
                            Property.GET_CONTENT_LENGTH: PropValue(42),
                            Property.GET_CONTENT_TYPE: PropValue("text/plain; charset=us-ascii"),
                            Property.GET_ETAG: PropValue('"0123456789abcdef"'),
                            Property.GET_LAST_MODIFIED: PropValue("2024-01-28T13:38:10+05:00"),
                            Property.RESOURCE_TYPE: PropValue.EMPTY,
                        },
                        status="HTTP/1.1 200 OK",
                    )
                ],
                location=None,
            ),
            DavResponse(
                href=Href.from_path("/foo/quux.dat"),
                propstat=[
                    PropStat(
                        prop={
                            Property.DISPLAY_NAME: PropValue("quux.dat"),
                            Property.GET_CONTENT_LENGTH: PropValue(65535),
                            Property.GET_CONTENT_TYPE: PropValue("application/octet-stream"),
                            Property.GET_ETAG: PropValue('"ABCDEFGHIJKLMNOPQRSTUVWXYZ"'),
                            Property.GET_LAST_MODIFIED: PropValue("2024-01-28T13:39:25+05:00"),
                            Property.RESOURCE_TYPE: PropValue.EMPTY,
                        },
                        status="HTTP/1.1 307 TEMPORARY REDIRECT",
                    )
                ],
                location=Href.from_url("https://www.example.com/data/quux.dat"),
            ),
        ]
    )
    assert value.to_xml() == EXPECTED_MULTISTATUS


def test_tag_defaults_to_dav_namespace():
    tag = Tag("getetag")
    assert tag.namespace == "DAV:"
    assert tag.dav_name() == "getetag"
    assert str(tag) == "{DAV:}getetag"


def test_tag_foreign_namespace_has_no_dav_name():
    tag = Tag("bigbox", "http://ns.example.com/boxschema/")
    assert tag.dav_name() is None
    assert str(tag) == "{http://ns.example.com/boxschema/}bigbox"


def test_property_from_tag_standard():
    assert Property.from_tag(Tag("creationdate", "DAV:")) == Property.CREATION_DATE
    assert Property.from_tag(Tag("resourcetype")).is_standard


def test_property_from_tag_custom():
    prop = Property.from_tag(Tag("creationdate", "http://ns.example.com/"))
    assert not prop.is_standard
    assert prop != Property.CREATION_DATE


def test_iter_standard_order():
    names = [p.tag.name for p in Property.iter_standard()]
    assert names == [
        "creationdate",
        "displayname",
        "getcontentlength",
        "getcontenttype",
        "getetag",
        "getlastmodified",
        "resourcetype",
    ]


def test_property_ordering_custom_last():
    custom_a = Property.from_tag(Tag("aaa"))
    custom_b = Property.from_tag(Tag("bbb"))
    props = [custom_b, Property.RESOURCE_TYPE, custom_a, Property.CREATION_DATE]
    assert sorted(props) == [Property.CREATION_DATE, Property.RESOURCE_TYPE, custom_a, custom_b]


def test_custom_property_renders_namespace():
    prop_dav = Property.from_tag(Tag("supported-report-set"))
    prop_box = Property.from_tag(Tag("bigbox", "http://ns.example.com/boxschema/"))
    value = Multistatus(
        response=[
            DavResponse(
                href=Href.from_path("/a b"),
                propstat=[
                    PropStat(
                        prop={prop_box: PropValue.EMPTY, prop_dav: PropValue.EMPTY},
                        status="HTTP/1.1 404 NOT FOUND",
                    )
                ],
            )
        ]
    )
    lines = value.to_xml().splitlines()
    assert lines[3] == "        <href>/a%20b</href>"
    assert lines[6] == '                <bigbox xmlns="http://ns.example.com/boxschema/" />'
    assert lines[7] == "                <supported-report-set />"


def test_text_is_escaped():
    value = Multistatus(
        response=[
            DavResponse(
                href=Href("/x"),
                propstat=[PropStat(prop={Property.DISPLAY_NAME: PropValue("a&b<c>")}, status="ok")],
            )
        ]
    )
    assert "<displayname>a&amp;b&lt;c&gt;</displayname>" in value.to_xml()


def test_empty_prop_and_multistatus():
    empty = Multistatus(response=[])
    assert empty.to_xml() == '<?xml version="1.0" encoding="UTF-8"?>\n<multistatus xmlns="DAV:" />\n'
    resp = Multistatus(
        response=[DavResponse(href=Href("/"), propstat=[PropStat(prop={}, status="HTTP/1.1 200 OK")])]
    )
    assert "            <prop />" in resp.to_xml().splitlines()


def test_propvalue_rejects_bad_combinations():
    with pytest.raises(ValueError):
        PropValue("x", collection=True)
    with pytest.raises(TypeError):
        PropValue(True)