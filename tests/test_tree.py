import pytest

from a11y_analyzer import MalformedMarkupError, parse


def test_parse_keeps_document_order():
    tree = parse("<div><h2>a</h2><p><h1>b</h1></p></div><h3>c</h3>")
    assert [el.tag for el in tree.select_by_tag("h1", "h2", "h3")] == ["h2", "h1", "h3"]
    positions = [el.position for el in tree]
    assert positions == sorted(positions)
    assert positions == list(range(len(tree)))


def test_parse_tolerates_broken_markup():
    tree = parse("<html><body><div><img src=x><p>unclosed<span>still</div></body>")
    assert [el.tag for el in tree.select_by_tag("img")] == ["img"]
    assert len(tree.select_by_tag("span")) == 1


def test_parse_accepts_bytes():
    tree = parse(b"<main><img alt='x'></main>")
    assert tree.select_by_tag("img")[0].attribute("alt") == "x"


def test_parse_empty_input_gives_empty_tree():
    assert len(parse("")) == 0


@pytest.mark.parametrize("bad", [None, 42, ["<p>"]])
def test_parse_rejects_non_text(bad):
    with pytest.raises(MalformedMarkupError):
        parse(bad)


def test_attribute_lookup_is_case_insensitive():
    img = parse('<IMG SRC="a.png" Alt="Logo">').select_by_tag("img")[0]
    assert img.tag == "img"
    assert img.attribute("alt") == "Logo"
    assert img.attribute("ALT") == "Logo"
    assert img.has_attribute("Src")
    assert img.attribute("title") is None


def test_multi_valued_class_is_joined():
    div = parse('<div class="a  b c"></div>').select_by_tag("div")[0]
    assert div.attribute("class") == "a b c"


def test_parent_and_ancestors():
    tree = parse("<main><section><img></section></main>")
    img = tree.select_by_tag("img")[0]
    assert img.parent.tag == "section"
    assert [el.tag for el in img.ancestors()] == ["section", "main"]
    assert tree.select_by_tag("main")[0].parent is None


def test_select_with_predicate():
    tree = parse('<p aria-label="x"></p><span></span><b aria-label="y"></b>')
    labelled = tree.select(lambda el: el.has_attribute("aria-label"))
    assert [el.tag for el in labelled] == ["p", "b"]


def test_elements_are_read_only():
    img = parse("<img alt='x'>").select_by_tag("img")[0]
    with pytest.raises(AttributeError):
        img.tag = "div"
    with pytest.raises(TypeError):
        img.attributes["alt"] = "changed"
