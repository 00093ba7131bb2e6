"""
Unit tests for the lxml document host.

This module contains tests resolving real HTML with LxmlHost:
- srcdoc, src (file loader) and blank iframes
- Nested frames
- Predicate generators against parsed documents
- Scalar results, namespaces and evaluation errors
"""

import lxml.html
import pytest
from lxml import etree

from xpath_locator.config import ResolverConfig
from xpath_locator.errors import XPathEvaluationError
from xpath_locator.hosts.lxml_host import HtmlDocument, LxmlHost, file_loader
from xpath_locator.locators import at, quote, xclass, xid, xname, xtext
from xpath_locator.resolver import EMPTY_MATCHES, CollectingReporter, FrameAwareResolver
from xpath_locator.resolver.frames import NO_FRAME_DOCUMENT, NON_FRAME_ELEMENT

PAGE = """
<html>
<body>
    <h1>Main</h1>
    <div class="Toolbar Primary">
        <button class="btn" name="save">Save</button>
        <button class="btn" name="cancel">Cancel</button>
        <button class="BTN" name="help">Help</button>
    </div>
    <p>He said "it's fine"</p>
    <iframe name="editor" srcdoc="<p id='first'>Hello</p><p>World</p>"></iframe>
    <iframe name="blank"></iframe>
</body>
</html>
"""


@pytest.fixture
def reporter():
    return CollectingReporter()


@pytest.fixture
def host():
    return LxmlHost()


@pytest.fixture
def resolver(host, reporter):
    return FrameAwareResolver(host, reporter=reporter, config=ResolverConfig())


@pytest.fixture
def page():
    return HtmlDocument.from_string(PAGE)


def texts(matches):
    return [node.text_content() for node in matches]


class TestHtmlDocument:
    """Test document construction."""

    def test_evaluator_not_installed_initially(self, page):
        assert page.evaluator is None

    def test_empty_string_gives_blank_document(self):
        document = HtmlDocument.from_string("")
        assert document.root.tag == "html"

    def test_whitespace_string_gives_blank_document(self):
        document = HtmlDocument.from_string(" \n\t")
        assert document.root.tag == "html"

    def test_from_file_honours_meta_charset(self, tmp_path):
        path = tmp_path / "latin1.html"
        path.write_bytes(b'<html><head><meta charset="iso-8859-1"></head><body><p>caf\xe9</p></body></html>')
        document = HtmlDocument.from_file(path)
        assert document.root.findtext(".//p") == "café"

    def test_from_file_sets_file_url(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_text("<p>x</p>", encoding="utf-8")
        document = HtmlDocument.from_file(path)
        assert document.url == path.resolve().as_uri()


class TestLxmlHostEvaluation:
    """Test plain evaluation through the resolver."""

    def test_installs_evaluator_on_demand(self, resolver, page):
        matches = resolver.resolve("//h1", page)
        assert texts(matches) == ["Main"]
        assert page.evaluator is not None

    def test_positional_index(self, resolver, page):
        assert texts(resolver.resolve(at("//button", -1), page)) == ["Help"]
        assert texts(resolver.resolve(at("//button", 0), page)) == ["Save"]

    def test_attribute_predicate(self, resolver, page):
        assert texts(resolver.resolve(xname("cancel", "//button"), page)) == ["Cancel"]

    def test_case_insensitive_predicate(self, resolver, page):
        assert texts(resolver.resolve(xclass.i("btn", "//button"), page)) == ["Save", "Cancel", "Help"]

    def test_contains_predicate(self, resolver, page):
        matches = list(resolver.resolve(xclass.c("Primary", "//div"), page))
        assert len(matches) == 1

    def test_negated_predicate(self, resolver, page):
        assert texts(resolver.resolve(xname.n("save", "//button"), page)) == ["Cancel", "Help"]

    def test_mixed_quotes_match_text(self, resolver, page):
        matches = resolver.resolve(xtext('He said "it\'s fine"', "//p"), page)
        assert len(list(matches)) == 1

    def test_quoted_literal_round_trip(self, resolver, page):
        value = 'a"b\'c'
        result = resolver.resolve(f"string({quote(value)})", page)
        assert list(result) == [value]

    def test_scalar_result_is_single_item(self, resolver, page):
        assert list(resolver.resolve("count(//button)", page)) == [3.0]

    def test_svg_prefix_is_registered(self, resolver, page):
        assert list(resolver.resolve("//svg:rect", page)) == []

    def test_unknown_prefix_raises(self, resolver, page):
        with pytest.raises(XPathEvaluationError):
            list(resolver.resolve("//foo:rect", page))

    def test_syntax_error_raises(self, resolver, page):
        with pytest.raises(XPathEvaluationError) as excinfo:
            resolver.resolve("//button[", page)
        assert excinfo.value.expression == "//button["


class TestLxmlHostFrames:
    """Test '/content:' paths into iframes."""

    def test_srcdoc_frame(self, resolver, reporter, page):
        matches = resolver.resolve(xname("editor", "//iframe") + "/content://p", page)
        assert texts(matches) == ["Hello", "World"]
        assert reporter.messages == []

    def test_predicate_inside_frame(self, resolver, page):
        path = xname("editor", "//iframe") + "/content:" + xid("first", "//p")
        assert texts(resolver.resolve(path, page)) == ["Hello"]

    def test_blank_frame_has_empty_body(self, resolver, page):
        matches = list(resolver.resolve(xname("blank", "//iframe") + "/content://body", page))
        assert len(matches) == 1
        assert matches[0].text_content() == ""

    def test_missing_frame(self, resolver, reporter, page):
        matches = resolver.resolve(xname("nope", "//iframe") + "/content://p", page)
        assert matches is EMPTY_MATCHES
        assert reporter.messages == []

    def test_non_frame_element(self, resolver, reporter, page):
        matches = resolver.resolve("//h1/content://p", page)
        assert matches is EMPTY_MATCHES
        assert reporter.messages == [NON_FRAME_ELEMENT, NO_FRAME_DOCUMENT]

    def test_frame_document_is_reused(self, host, resolver, page):
        frame = resolver.resolve(xname("editor", "//iframe"), page).iterate_next()
        assert host.get_frame_content_window(frame) is host.get_frame_content_window(frame)

    def test_frames_reloaded_after_clear(self, host, resolver, page):
        frame = resolver.resolve(xname("editor", "//iframe"), page).iterate_next()
        first = host.get_frame_content_window(frame)
        host.clear_frames()
        assert host.get_frame_content_window(frame) is not first

    def test_whitespace_srcdoc_is_blank(self, resolver, reporter):
        document = HtmlDocument.from_string('<iframe srcdoc=" "></iframe>')
        matches = list(resolver.resolve("//iframe/content://body", document))
        assert len(matches) == 1
        assert reporter.messages == []

    def test_unparsable_frame_has_no_document(self, resolver, reporter, monkeypatch):
        document = HtmlDocument.from_string('<iframe srcdoc="<!-- nothing -->"></iframe>')

        def empty_document(html, base_url=None):
            raise etree.ParserError("Document is empty")

        monkeypatch.setattr(lxml.html, "document_fromstring", empty_document)
        matches = resolver.resolve("//iframe/content://body", document)

        assert matches is EMPTY_MATCHES
        assert reporter.messages == [NO_FRAME_DOCUMENT]

    def test_src_without_loader_has_no_document(self, resolver, reporter):
        document = HtmlDocument.from_string('<iframe src="other.html"></iframe>')
        matches = resolver.resolve("//iframe/content://p", document)
        assert matches is EMPTY_MATCHES
        assert reporter.messages == [NO_FRAME_DOCUMENT]


class TestFileLoader:
    """Test frames loaded from files, including nesting."""

    @pytest.fixture
    def site(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "page.html").write_text(
            '<html><body><iframe id="outer" src="outer.html"></iframe></body></html>',
            encoding="utf-8",
        )
        (tmp_path / "outer.html").write_text(
            '<html><body><iframe name="inner" src="sub/inner.html"></iframe></body></html>',
            encoding="utf-8",
        )
        (tmp_path / "sub" / "inner.html").write_text(
            "<html><body><h1>Deep</h1></body></html>",
            encoding="utf-8",
        )
        return tmp_path

    def test_nested_frames_from_files(self, site, reporter):
        resolver = FrameAwareResolver(
            LxmlHost(loader=file_loader(site)), reporter=reporter, config=ResolverConfig()
        )
        path = (
            xid("outer", "//iframe")
            + "/content:"
            + xname("inner", "//iframe")
            + "/content://h1"
        )

        matches = resolver.resolve(path, HtmlDocument.from_file(site / "page.html"))

        assert texts(matches) == ["Deep"]
        assert reporter.messages == []

    def test_latin1_frame_file(self, site, reporter):
        (site / "latin1.html").write_bytes(
            b'<html><head><meta charset="iso-8859-1"></head><body><p>caf\xe9</p></body></html>'
        )
        resolver = FrameAwareResolver(
            LxmlHost(loader=file_loader(site)), reporter=reporter, config=ResolverConfig()
        )
        document = HtmlDocument.from_string('<iframe src="latin1.html"></iframe>')

        matches = resolver.resolve("//iframe/content://p", document)

        assert texts(matches) == ["café"]
        assert reporter.messages == []

    def test_relative_url_read_from_base_dir(self, site):
        load = file_loader(site)
        assert b"Deep" in load("sub/inner.html")

    def test_missing_file(self, site):
        assert file_loader(site)("missing.html") is None

    def test_remote_url_not_loaded(self, site):
        assert file_loader(site)("https://example.com/frame.html") is None
