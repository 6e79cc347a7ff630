import pytest

from zimkit.myhtmlparse import CharsetChanged, MyHtmlParser, StopParsing


@pytest.fixture
def parser():
    return MyHtmlParser()


def test_title_is_extracted_and_removed_from_dump(parser):
    parser.parse_html("<html><head><title>My Page</title></head></html>", "utf-8", False)
    assert parser.title == "My Page"
    assert parser.dump == ""


def test_only_first_title_is_kept(parser):
    parser.parse_html("<title>First</title><title>Second</title>", "utf-8", False)
    assert parser.title == "First"
    assert "Second" in parser.dump


def test_closing_body_stops_parsing(parser):
    with pytest.raises(StopParsing):
        parser.parse_html("<p>before</p><body>inside</body><p>after</p>", "utf-8", False)
    assert "inside" in parser.dump
    assert "before" not in parser.dump
    assert "after" not in parser.dump


def test_block_tags_separate_words(parser):
    parser.parse_html("<div>one</div><div>two</div>", "utf-8", False)
    assert parser.dump == "one two"


def test_inline_tags_do_not_separate_words(parser):
    parser.parse_html("<b>one</b>two", "utf-8", False)
    assert parser.dump == "onetwo"


def test_heading_tags_separate_words(parser):
    parser.parse_html("<h1>head</h1>text", "utf-8", False)
    assert parser.dump.split(" ") == ["head", "text"]


def test_script_and_style_text_is_ignored(parser):
    parser.parse_html(
        "<p>a<script>var hidden</script>b<style>p {color: red}</style></p>",
        "utf-8",
        False,
    )
    assert "hidden" not in parser.dump
    assert "color" not in parser.dump
    assert parser.in_script_tag is False
    assert parser.in_style_tag is False


def test_process_text_collapses_whitespace(parser):
    parser.process_text("  hi \t\n there ")
    assert parser.dump == "hi there"
    assert parser.pending_space is True


def test_process_text_without_trailing_space_clears_pending(parser):
    parser.process_text("word")
    assert parser.dump == "word"
    assert parser.pending_space is False


def test_meta_description_is_decoded(parser):
    parser.parse_html('<meta name="description" content="Fish &amp; chips">', "utf-8", False)
    assert parser.sample == "Fish & chips"


def test_only_first_description_is_kept(parser):
    parser.parse_html(
        '<meta name="description" content="first">'
        '<meta name="Description" content="second">',
        "utf-8",
        False,
    )
    assert parser.sample == "first"


def test_keywords_are_accumulated(parser):
    parser.parse_html(
        '<meta name="keywords" content="alpha"><meta name="KEYWORDS" content="beta">',
        "utf-8",
        False,
    )
    assert parser.keywords.split(" ") == ["alpha", "beta"]


@pytest.mark.parametrize("value", ["noindex", "NONE", "index, NoIndex"])
def test_robots_noindex_forbids_indexing(parser, value):
    with pytest.raises(StopParsing):
        parser.parse_html(f'<meta name="robots" content="{value}">', "utf-8", False)
    assert parser.indexing_allowed is False


def test_robots_index_allows_indexing(parser):
    parser.parse_html('<meta name="robots" content="index, follow">', "utf-8", False)
    assert parser.indexing_allowed is True


def test_geo_position(parser):
    parser.parse_html('<meta name="geo.position" content="12.5;-3.25">', "utf-8", False)
    assert parser.has_geo_position is True
    assert parser.latitude == pytest.approx(12.5)
    assert parser.longitude == pytest.approx(-3.25)


def test_geo_position_with_invalid_numbers(parser):
    parser.parse_html('<meta name="geo.position" content="abc;def">', "utf-8", False)
    assert parser.has_geo_position is True
    assert parser.latitude == 0.0
    assert parser.longitude == 0.0


def test_geo_position_without_separator_is_ignored(parser):
    parser.parse_html('<meta name="geo.position" content="12.5">', "utf-8", False)
    assert parser.has_geo_position is False


def test_http_equiv_charset_change_is_reported(parser):
    with pytest.raises(CharsetChanged) as info:
        parser.parse_html(
            '<meta http-equiv="Content-Type" content="text/html; charset=ISO-8859-1">',
            "utf-8",
            False,
        )
    assert info.value.charset == "iso-8859-1"


def test_http_equiv_same_charset_is_accepted(parser):
    parser.parse_html(
        '<meta http-equiv="content-type" content="text/html; charset=utf-8"><p>ok</p>',
        "utf-8",
        False,
    )
    assert parser.dump == "ok"


def test_http_equiv_quoted_charset_with_escape(parser):
    with pytest.raises(CharsetChanged) as info:
        parser.parse_html(
            "<meta http-equiv=\"content-type\" content='text/html; charset=\"utf\\-8\"'>",
            "latin1",
            False,
        )
    assert info.value.charset == "utf-8"


def test_html5_meta_charset(parser):
    with pytest.raises(CharsetChanged) as info:
        parser.parse_html('<meta charset="UTF-8">', "", False)
    assert info.value.charset == "utf-8"


def test_charset_from_meta_suppresses_changes(parser):
    parser.parse_html(
        '<meta charset="koi8-r"><meta http-equiv="content-type" content="text/html; charset=big5">x',
        "utf-8",
        True,
    )
    assert parser.charset == "utf-8"
    assert parser.dump == "x"


def test_reset_clears_state(parser):
    parser.parse_html(
        '<title>T</title><meta name="keywords" content="k">'
        '<meta name="geo.position" content="1;2"><p>text',
        "utf-8",
        False,
    )
    parser.reset()
    assert (parser.title, parser.keywords, parser.sample, parser.dump) == ("", "", "", "")
    assert parser.has_geo_position is False
    assert parser.pending_space is False
    assert parser.indexing_allowed is True


def test_opening_body_discards_head_text(parser):
    parser.parse_html("stray<body>kept", "utf-8", False)
    assert parser.dump == "kept"
    assert parser.charset == "utf-8"