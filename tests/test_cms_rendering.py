import pytest

from marketing_site.cms.images import image_url
from marketing_site.cms.portable_text import portable_text
from marketing_site.views.filters import text_value


def block(text, style="normal", marks=(), list_item=None, mark_defs=()):
    data = {
        "_type": "block",
        "style": style,
        "markDefs": list(mark_defs),
        "children": [{"_type": "span", "text": text, "marks": list(marks)}],
    }
    if list_item:
        data["listItem"] = list_item
    return data


class TestImageUrl:
    @pytest.fixture(autouse=True)
    def _ctx(self, app):
        with app.app_context():
            yield

    def test_asset_reference(self):
        source = {"asset": {"_ref": "image-Tb9Ew8CXIwaY6R1kjMvI0uRR-2000x3000-jpg"}}
        assert image_url(source, 800) == (
            "https://cdn.sanity.io/images/testproj/production/"
            "Tb9Ew8CXIwaY6R1kjMvI0uRR-2000x3000.jpg?auto=format&fit=max&w=800"
        )

    def test_resolved_url_passes_through(self):
        assert image_url("https://cdn.example.com/a.png", 100) == "https://cdn.example.com/a.png"
        assert image_url({"asset": {"url": "https://cdn.example.com/b.png"}}) == "https://cdn.example.com/b.png"

    def test_missing_or_invalid(self):
        assert image_url(None) is None
        assert image_url({}) is None
        assert image_url({"asset": {"_ref": "file-abc-pdf"}}) is None


class TestPortableText:
    def test_block_styles(self):
        html = portable_text([block("Title", "h2"), block("Body")])
        assert html == "<h2>Title</h2><p>Body</p>"

    def test_marks_and_links(self):
        link = {"_key": "l1", "_type": "link", "href": "https://example.com"}
        html = portable_text([
            block("bold", marks=["strong"]),
            block("site", marks=["l1"], mark_defs=[link]),
        ])
        assert "<p><strong>bold</strong></p>" in html
        assert '<a href="https://example.com" rel="noopener">site</a>' in html

    def test_lists_are_grouped(self):
        html = portable_text([
            block("one", list_item="bullet"),
            block("two", list_item="bullet"),
            block("after"),
        ])
        assert html == "<ul><li>one</li><li>two</li></ul><p>after</p>"

    def test_text_is_escaped(self):
        assert portable_text([block("<script>x</script>")]) == "<p>&lt;script&gt;x&lt;/script&gt;</p>"

    def test_plain_string_and_empty(self):
        assert portable_text("a < b") == "<p>a &lt; b</p>"
        assert portable_text(None) == ""

    def test_unknown_blocks_skipped(self):
        assert portable_text([{"_type": "image"}, block("kept")]) == "<p>kept</p>"

    def test_malformed_children_skipped(self):
        broken = block("kept")
        broken["children"] = ["plain", None, 3, *broken["children"]]
        assert portable_text([broken]) == "<p>kept</p>"
        assert portable_text([{"_type": "block", "children": ["plain"]}]) == "<p></p>"


class TestTextValue:
    def test_plain_and_localized(self):
        assert text_value("Ciao") == "Ciao"
        assert text_value({"en": "Hello", "es": "Hola"}) == "Hello"
        assert text_value({"it": "Ciao", "en": "Hello"}) == "Ciao"

    def test_empty(self):
        assert text_value(None) == ""
        assert text_value({}) == ""
        assert text_value(42) == ""
