from portfolio_cms.document.custom_code import (
    BODY_END_CONTAINER_ID,
    BODY_START_CONTAINER_ID,
    HEAD_CONTAINER_ID,
    CustomCodeInjector,
)
from portfolio_cms.document.dom import Document, Element
from portfolio_cms.models.settings_blobs import CustomCodeSettings


def _document_with_content():
    document = Document(script_runner=lambda script: None)
    document.body.append_child(Element("main", [("id", "content")]))
    return document


def test_containers_are_placed_at_their_injection_points():
    document = _document_with_content()
    code = CustomCodeSettings(
        head_code='<meta name="verify" content="abc">',
        body_start_code="<noscript>start</noscript>",
        body_end_code="<div>end</div>",
    )

    CustomCodeInjector(document).apply(code)

    assert document.head.children[-1].id == HEAD_CONTAINER_ID
    assert document.body.children[0].id == BODY_START_CONTAINER_ID
    assert document.body.children[-1].id == BODY_END_CONTAINER_ID
    assert document.body.children[1].id == "content"


def test_injected_scripts_are_fresh_nodes_that_run():
    document = _document_with_content()
    code = CustomCodeSettings(
        head_code=(
            '<script async src="https://example.com/a.js" data-id="x"></script>'
            "<script>window.inline = true;</script>"
        )
    )

    CustomCodeInjector(document).apply(code)

    container = document.get_element_by_id(HEAD_CONTAINER_ID)
    scripts = container.find_all("script")
    assert len(scripts) == 2
    assert document.executed_scripts == scripts
    assert scripts[0].attributes == [
        ("async", None),
        ("src", "https://example.com/a.js"),
        ("data-id", "x"),
    ]
    assert scripts[1].text_content == "window.inline = true;"


def test_reapplying_replaces_containers():
    document = _document_with_content()
    injector = CustomCodeInjector(document)

    injector.apply(CustomCodeSettings(body_end_code="<p>one</p>"))
    injector.apply(CustomCodeSettings(body_end_code="<p>two</p>"))

    containers = [
        el for el in document.iter("div") if el.id == BODY_END_CONTAINER_ID
    ]
    assert len(containers) == 1
    assert containers[0].text_content == "two"


def test_empty_code_removes_container():
    document = _document_with_content()
    injector = CustomCodeInjector(document)

    injector.apply(CustomCodeSettings(head_code="<style>p{}</style>"))
    injector.apply(CustomCodeSettings(head_code=""))

    assert document.get_element_by_id(HEAD_CONTAINER_ID) is None


def test_none_leaves_document_untouched():
    document = _document_with_content()
    CustomCodeInjector(document).apply(None)

    assert [child.id for child in document.body.children] == ["content"]
    assert document.head.children == []
