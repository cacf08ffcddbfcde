"""
Unit tests for heading-rank section partitioning:
- validate_top_heading_tags()
- find_top_heading()
- partition_sections()
- mark_subheadings_editable()

Run with: pytest tests/test_headings.py -v
"""

import pytest
from bs4 import Tag

from document.tree import get_body
from transform.errors import InvalidConfiguration
from transform.headings import (
    EDITABLE_HEADING_CLASS,
    find_top_heading,
    mark_subheadings_editable,
    partition_sections,
    validate_top_heading_tags,
)


def _sectioned(soup_of, body_html, html, tags):
    soup = soup_of(html)
    top_heading = find_top_heading(soup, tags)
    partition_sections(soup, top_heading)
    mark_subheadings_editable(soup, top_heading)
    return body_html(soup)


# ---------------------------------------------------------------------------
# validate_top_heading_tags
# ---------------------------------------------------------------------------


class TestValidateTopHeadingTags:
    def test_keeps_rank_order(self):
        assert validate_top_heading_tags(["h2", "h1"]) == ["h2", "h1"]

    def test_lowercases_tag_names(self):
        assert validate_top_heading_tags(("H3", " h4 ")) == ["h3", "h4"]

    @pytest.mark.parametrize(
        "tags",
        [
            [],
            ["div"],
            ["h1", "h7"],
            ["h2", None],
            "h2",
        ],
    )
    def test_rejects_invalid_lists(self, tags):
        with pytest.raises(InvalidConfiguration):
            validate_top_heading_tags(tags)

    def test_invalid_configuration_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_top_heading_tags([])


# ---------------------------------------------------------------------------
# find_top_heading
# ---------------------------------------------------------------------------


class TestFindTopHeading:
    def test_first_listed_tag_present_wins(self, soup_of):
        soup = soup_of("<h1>Foo</h1><h2>Bar</h2>")
        assert find_top_heading(soup, ["h2", "h1"]) == "h2"
        assert find_top_heading(soup, ["h1", "h2"]) == "h1"

    def test_nested_heading_counts(self, soup_of):
        soup = soup_of("<div><section><h3>Deep</h3></section></div>")
        assert find_top_heading(soup, ["h2", "h3"]) == "h3"

    def test_no_listed_tag_present(self, soup_of):
        soup = soup_of("<h1>Foo</h1><h2>Bar</h2>")
        assert find_top_heading(soup, ["h3"]) is None

    def test_empty_list(self, soup_of):
        soup = soup_of("<h1>Foo</h1>")
        assert find_top_heading(soup, []) is None


# ---------------------------------------------------------------------------
# partition_sections + mark_subheadings_editable
# ---------------------------------------------------------------------------


class TestSectioning:
    @pytest.mark.parametrize(
        "tags, html, expected",
        [
            (
                ["h1", "h2"],
                "<h1>Foo</h1><h2>Bar</h2>",
                '<h1>Foo</h1><div><h2 class="in-block">Bar</h2></div>',
            ),
            (
                ["h1", "h2"],
                "A<h1>Foo</h1><h2>Bar</h2>",
                '<div>A</div><h1>Foo</h1><div><h2 class="in-block">Bar</h2></div>',
            ),
            (
                ["h2", "h1"],
                "<h1>Foo</h1><h2>Bar</h2>",
                '<div><h1 class="in-block">Foo</h1></div><h2>Bar</h2>',
            ),
            (
                ["h3"],
                "<h1>Foo</h1><h2>Bar</h2>",
                '<h1 class="in-block">Foo</h1><h2 class="in-block">Bar</h2>',
            ),
            (
                [],
                "<h1>Foo</h1><h2>Bar</h2>",
                '<h1 class="in-block">Foo</h1><h2 class="in-block">Bar</h2>',
            ),
            (
                ["h2"],
                "<h2>A</h2>text<h2>B</h2>more",
                "<h2>A</h2><div>text</div><h2>B</h2><div>more</div>",
            ),
            (
                ["h2"],
                "<h2>A</h2><h2>B</h2>",
                "<h2>A</h2><div></div><h2>B</h2>",
            ),
            (
                ["h2"],
                "<h2>A</h2><p>one</p><h3>Sub</h3><p>two</p>",
                '<h2>A</h2><div><p>one</p><h3 class="in-block">Sub</h3><p>two</p></div>',
            ),
        ],
    )
    def test_transform(self, soup_of, body_html, tags, html, expected):
        assert _sectioned(soup_of, body_html, html, tags) == expected

    def test_top_rank_heading_below_body_level(self, soup_of, body_html):
        # h2 is the top rank but never a direct child of <body>.
        html = "<div><h2>In</h2></div><p>x</p>"
        assert (
            _sectioned(soup_of, body_html, html, ["h2"])
            == "<div><div><h2>In</h2></div><p>x</p></div>"
        )

    def test_comments_are_moved_like_content(self, soup_of, body_html):
        html = "<!-- lead --><h2>A</h2><!-- tail -->"
        assert (
            _sectioned(soup_of, body_html, html, ["h2"])
            == "<div><!-- lead --></div><h2>A</h2><div><!-- tail --></div>"
        )

    def test_no_top_heading_leaves_body_untouched(self, soup_of, body_html):
        soup = soup_of("<p>a</p><h2>b</h2>")
        assert partition_sections(soup, None) == 0
        assert body_html(soup) == "<p>a</p><h2>b</h2>"

    def test_returns_number_of_wrappers(self, soup_of):
        soup = soup_of("lead<h2>A</h2><h2>B</h2>tail")
        assert partition_sections(soup, "h2") == 3

    def test_content_is_preserved_in_order(self, soup_of):
        soup = soup_of(
            "intro<p>1</p><h2>A</h2><p>2</p>text<h3>s</h3><h2>B</h2><ul><li>3</li></ul>"
        )
        body = get_body(soup)
        original = list(body.contents)

        partition_sections(soup, "h2")

        flattened = []
        for child in body.contents:
            if any(child is node for node in original):
                flattened.append(child)
            else:
                assert isinstance(child, Tag) and child.name == "div"
                flattened.extend(child.contents)

        assert len(flattened) == len(original)
        assert all(a is b for a, b in zip(flattened, original))


class TestMarkSubheadingsEditable:
    def test_appends_after_existing_classes(self, soup_of, body_html):
        soup = soup_of('<h3 class="mw-heading mw-heading3">x</h3>')
        mark_subheadings_editable(soup, "h2")
        assert body_html(soup) == '<h3 class="mw-heading mw-heading3 in-block">x</h3>'

    def test_is_idempotent(self, soup_of, body_html):
        soup = soup_of('<h2>a</h2><h3 class="foo">b</h3><h4>c</h4>')
        assert mark_subheadings_editable(soup, "h2") == 2
        once = body_html(soup)
        assert mark_subheadings_editable(soup, "h2") == 0
        assert body_html(soup) == once
        assert once == '<h2>a</h2><h3 class="foo in-block">b</h3><h4 class="in-block">c</h4>'

    def test_leading_whitespace_in_class_is_dropped(self, soup_of, body_html):
        soup = soup_of('<h3 class=" foo">b</h3>')
        mark_subheadings_editable(soup, None)
        assert body_html(soup) == '<h3 class="foo in-block">b</h3>'

    def test_every_heading_marked_without_top_rank(self, soup_of):
        soup = soup_of("<h1>1</h1><h2>2</h2><h3>3</h3><h4>4</h4><h5>5</h5><h6>6</h6>")
        mark_subheadings_editable(soup, None)
        for heading in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
            assert heading["class"] == [EDITABLE_HEADING_CLASS]

    def test_top_rank_never_marked(self, soup_of):
        soup = soup_of("<div><h2>nested</h2></div><h2>top</h2><h1>other</h1>")
        mark_subheadings_editable(soup, "h2")
        assert all(h.get("class") is None for h in soup.find_all("h2"))
        assert soup.find("h1")["class"] == [EDITABLE_HEADING_CLASS]
