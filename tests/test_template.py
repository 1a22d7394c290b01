import pytest

from korelite.template import (
    TemplateNotFoundError,
    TemplateRegistry,
    replace_variables,
)


def test_replace_single_variable():
    assert replace_variables("Hello {{ name }}!", {"name": "World"}) == "Hello World!"


def test_replace_repeated_variable():
    result = replace_variables("{{ x }}-{{ x }}", {"x": "ab"})
    assert result == "ab-ab"


def test_unknown_variable_left_alone():
    text = "Hi {{ other }}"
    assert replace_variables(text, {"name": "x"}) == text


def test_placeholder_requires_spaces():
    text = "{{name}}"
    assert replace_variables(text, {"name": "x"}) == text


def test_value_containing_own_placeholder_rejected():
    with pytest.raises(ValueError):
        replace_variables("{{ a }}", {"a": "{{ a }}"})


def test_render_without_parent():
    registry = TemplateRegistry()
    registry.register("page", "<p>{{ msg }}</p>")
    assert registry.render("page", {"msg": "hi"}) == "<p>hi</p>"


def test_render_with_parent_replaces_block():
    registry = TemplateRegistry()
    registry.register("base", "<title>{{ title }}</title>{% block content %}default{% endblock %}<end>")
    registry.register("page", "<p>{{ msg }}</p>", "base")
    result = registry.render("page", {"msg": "hi", "title": "T"})
    assert result == "<title>T</title><p>hi</p><end>"
    assert "default" not in result


def test_render_with_missing_parent_returns_child():
    registry = TemplateRegistry()
    registry.register("page", "body {{ a }}", "nowhere")
    assert registry.render("page", {"a": "1"}) == "body 1"


def test_render_parent_without_block_returns_child():
    registry = TemplateRegistry()
    registry.register("base", "no blocks here")
    registry.register("page", "child", "base")
    assert registry.render("page") == "child"


def test_render_unknown_template():
    with pytest.raises(TemplateNotFoundError):
        TemplateRegistry().render("missing", {})


def test_reregister_replaces():
    registry = TemplateRegistry()
    registry.register("page", "old")
    registry.register("page", "new")
    assert registry.render("page") == "new"
    assert registry.find("page").content == "new"
    assert registry.find("nothing") is None