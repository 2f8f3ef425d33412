"""Unit tests for mdlinks.api.link.extract_links."""

from mdlinks.api.link.extract_links import extract_links


def test_empty_content_has_no_links():
    assert extract_links("") == []


def test_plain_text_has_no_links():
    assert extract_links("# Title\n\nJust prose, no links.\n") == []


def test_inline_link_fields():
    content = "# Title\n\nSee [the guide](./guide.md) for details.\n"
    (link,) = extract_links(content)
    assert link.href == "./guide.md"
    assert link.text == "the guide"
    assert link.line == 3
    assert content[link.start : link.end] == "./guide.md"


def test_links_in_source_order_with_lines():
    content = "[a](a.md)\n\n- [b](b.md)\n- [c](c.md#sec)\n"
    links = extract_links(content)
    assert [link.href for link in links] == ["a.md", "b.md", "c.md#sec"]
    assert [link.line for link in links] == [1, 3, 4]


def test_offsets_point_at_href_not_text():
    # Link text equals the href: offsets must select the destination
    content = "[a.md](a.md)"
    (link,) = extract_links(content)
    assert (link.start, link.end) == (7, 11)


def test_same_href_twice_on_one_line_gets_distinct_offsets():
    content = "[x](a.md) and [y](a.md)\n"
    first, second = extract_links(content)
    assert first.start < second.start
    assert content[first.start : first.end] == "a.md"
    assert content[second.start : second.end] == "a.md"


def test_href_is_kept_raw():
    content = "[x](my%20file.md) [y](dir/ü.md)"
    assert [link.href for link in extract_links(content)] == ["my%20file.md", "dir/ü.md"]


def test_autolink_is_extracted():
    content = "Visit <https://example.com/page> now"
    (link,) = extract_links(content)
    assert link.href == "https://example.com/page"
    assert content[link.start : link.end] == link.href


def test_images_are_not_links():
    assert extract_links("![diagram](img/diagram.png)") == []


def test_nested_formatting_is_not_part_of_text():
    (link,) = extract_links("[plain *emph* more](a.md)")
    assert link.text == "plain  more"


def test_empty_href_has_no_offsets():
    (link,) = extract_links("[nothing]()")
    assert link.href == ""
    assert link.start is None and link.end is None


def test_reference_links_are_not_extracted():
    content = "See [guide][g], [g][] and [g].\n\n[g]: ./guide.md\n"
    assert extract_links(content) == []


def test_link_on_continuation_line_of_paragraph():
    content = "first line\nsecond [x](x.md)\n"
    (link,) = extract_links(content)
    assert link.line == 2


def test_crlf_content_offsets():
    content = "intro\r\n\r\n[x](x.md)\r\n"
    (link,) = extract_links(content)
    assert link.line == 3
    assert content[link.start : link.end] == "x.md"


def test_angle_bracket_destination():
    content = "[x](<with space.md>)"
    (link,) = extract_links(content)
    assert link.href == "with space.md"
    assert content[link.start : link.end] == "with space.md"


def test_malformed_markdown_does_not_raise():
    assert extract_links("[unclosed](a.md\n\n[also [bad](") == []


def test_link_inside_code_span_is_ignored():
    assert extract_links("`[x](x.md)`") == []


def test_reference_link_beside_inline_link_sharing_its_prefix():
    # Only the inline link is a link of its own; its offsets are its own href
    content = "[t][r] and [u](../page.md.bak)\n\n[r]: ../page.md\n"
    (inline,) = extract_links(content)
    assert inline.href == "../page.md.bak"
    assert content[inline.start : inline.end] == "../page.md.bak"


def test_inline_link_after_reference_link_on_continuation_line():
    content = "intro [t][r] text\nmore [u](a.md) here\n\n[r]: a.md\n"
    (inline,) = extract_links(content)
    assert inline.line == 2
    assert content[inline.start : inline.end] == "a.md"


def test_invalid_inline_destination_falling_back_to_definition_is_not_extracted():
    content = "[r](not a dest) x\n\n[r]: a.md\n"
    assert [link.href for link in extract_links(content)] == []


def test_entity_href_on_continuation_line_reports_its_own_line():
    (link,) = extract_links("first line\nsee [x](a&amp;b.md) here")
    assert link.href == "a&b.md"
    assert link.line == 2
    assert link.start is None and link.end is None


def test_escaped_destination_has_no_offsets():
    content = "[x](a\\(1\\).md)"
    (link,) = extract_links(content)
    assert link.href == "a(1).md"
    assert link.start is None


def test_destination_on_next_line_after_paren():
    content = "[x](\n  next.md)\n"
    (link,) = extract_links(content)
    assert link.line == 1
    assert content[link.start : link.end] == "next.md"


def test_links_in_blockquote_and_list_item_offsets():
    content = "> quoted [q](q.md)\n\n- item\n  continued [c](c.md)\n"
    quoted, continued = extract_links(content)
    assert content[quoted.start : quoted.end] == "q.md"
    assert continued.line == 4
    assert content[continued.start : continued.end] == "c.md"


def test_link_with_title_offsets_cover_only_the_href():
    content = '[x](x.md "Title")'
    (link,) = extract_links(content)
    assert content[link.start : link.end] == "x.md"
