from portfolio_cms.document.dom import Document, Element, Text, parse_fragment
from portfolio_cms.document.render import (
    CONTENT_ID,
    render_body_end,
    render_body_start,
    render_document,
    render_head,
)


def test_set_attribute_keeps_position():
    element = Element("meta", [("name", "description"), ("content", "old")])
    element.set_attribute("content", "new")
    element.set_attribute("data-x", "1")

    assert element.attributes == [
        ("name", "description"),
        ("content", "new"),
        ("data-x", "1"),
    ]


def test_parse_fragment_builds_nested_nodes():
    nodes = parse_fragment('<p class="a">Hi <b>there</b></p><br>tail')

    assert [type(n).__name__ for n in nodes] == ["Element", "Element", "Text"]
    paragraph = nodes[0]
    assert paragraph.get_attribute("class") == "a"
    assert paragraph.text_content == "Hi there"


def test_parsed_scripts_do_not_run():
    document = Document()
    container = document.create_element("div")
    container.set_inner_html("<script>alert(1)</script>")
    document.body.append_child(container)

    assert document.executed_scripts == []


def test_created_script_runs_once_when_connected():
    ran = []
    document = Document(script_runner=ran.append)
    script = document.create_element("script")
    script.text_content = "console.log(1)"

    assert ran == []
    document.body.append_child(script)
    document.head.append_child(script)

    assert ran == [script]
    assert document.executed_scripts == [script]


def test_title_element_is_created_first_in_head():
    document = Document()
    document.head.append_child(Element("meta", [("charset", "utf-8")]))
    document.title = "Hello"

    assert document.head.children[0].tag == "title"
    assert document.title == "Hello"
    document.title = "Again"
    assert len(document.head.find_all("title")) == 1


def test_render_escapes_text_but_not_script_bodies():
    document = Document(title="A & B")
    script = Element("script")
    script.append_child(Text("if (a < b) {}"))
    document.body.append_child(script)

    html = render_document(document)

    assert "<title>A &amp; B</title>" in html
    assert "<script>if (a < b) {}</script>" in html


def test_body_is_split_around_content_placeholder():
    document = Document()
    before = Element("div", [("id", "before")])
    placeholder = Element("div", [("id", CONTENT_ID)])
    after = Element("div", [("id", "after")])
    for node in (before, placeholder, after):
        document.body.append_child(node)

    assert 'id="before"' in render_body_start(document)
    assert 'id="after"' in render_body_end(document)
    assert CONTENT_ID not in render_body_start(document) + render_body_end(document)
    assert render_head(document) == ""
