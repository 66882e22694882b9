"""Tests for the Handlebars transform engine.

The suite checks rendered templates and field descriptors for representative
Bootstrap fragments, the first-key-wins field registry, and the structural
round trip: substituting each field's default back into the template must
reproduce the source element tree (modulo whitespace collapsing).

Usage
-----
Run ``pytest tests/test_transform.py -v``. Jinja2 renders the templates for
the round-trip checks and BeautifulSoup compares the resulting trees.
"""

from __future__ import annotations

import re
import typing as typ

import pytest
from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from jinja2 import Environment

from bootstrap_hbs.html_parser import parse_html
from bootstrap_hbs.request import ClassesMode, GenerationOptions
from bootstrap_hbs.transform import HbsTransformer, transform_to_hbs
from bootstrap_hbs.transform.engine import escape_attribute

if typ.TYPE_CHECKING:
    from bootstrap_hbs.transform import TransformResult

HERO_MARKUP = """
<section class="py-5 bg-light">
  <div class="container text-center">
    <!-- headline -->
    <h1 class="display-5 fw-bold">Build faster</h1>
    <p class="lead">Compose pages from
       ready-made blocks.</p>
    <a class="btn btn-primary" href="/signup">Get started</a>
    <a class="btn btn-outline-secondary" href="/docs">Read the docs</a>
    <img class="img-fluid" src="hero.png" alt="Screenshot">
  </div>
</section>
"""


def _transform(markup: str, **options: typ.Any) -> TransformResult:  # noqa: ANN401
    return transform_to_hbs(parse_html(markup), GenerationOptions(**options))


def _keys(result: TransformResult) -> list[str]:
    return [field.key for field in result.fields]


def _structure(markup: str) -> list[object]:
    """Return the element/attribute/text shape of ``markup``."""
    soup = BeautifulSoup(markup, "html.parser")

    def _walk(node: Tag) -> list[object]:
        shape: list[object] = []
        for child in node.children:
            if isinstance(child, Tag):
                attrs = {
                    name: " ".join(value) if isinstance(value, list) else value
                    for name, value in child.attrs.items()
                }
                shape.append((child.name, attrs, _walk(child)))
            elif isinstance(child, Comment):
                continue
            elif isinstance(child, NavigableString) and child.strip():
                shape.append(re.sub(r"\s+", " ", str(child)).strip())
        return shape

    return _walk(soup)


def test_first_heading_and_paragraph_claim_title_and_subtitle() -> None:
    result = _transform("<section><h1>A</h1><p>B</p></section>")
    assert result.template == "<section><h1>{{title}}</h1><p>{{subtitle}}</p></section>"
    assert [(f.key, f.type, f.default) for f in result.fields] == [
        ("title", "text", "A"),
        ("subtitle", "text", "B"),
    ]


def test_image_renders_self_closed_with_two_attribute_fields() -> None:
    result = _transform('<div><img src="x.png" alt="y"></div>')
    assert result.template == '<div><img src="{{img_src}}" alt="{{img_alt}}" /></div>'
    assert [field.as_dict() for field in result.fields] == [
        {"key": "img_src", "type": "url", "label": "SRC", "default": "x.png"},
        {"key": "img_alt", "type": "text", "label": "ALT", "default": "y"},
    ]


def test_fixed_classes_mode_keeps_class_literal() -> None:
    result = _transform(
        '<section class="py-5"><h1>A</h1></section>',
        classes_mode=ClassesMode.FIXED,
    )
    assert result.template == '<section class="py-5"><h1>{{title}}</h1></section>'
    assert all(field.type != "classes" for field in result.fields)


def test_hero_fragment_fields() -> None:
    result = _transform(HERO_MARKUP)
    assert _keys(result) == [
        "section_classes",
        "container_classes",
        "h1_classes",
        "title",
        "p_classes_2",
        "subtitle",
        "btn_classes",
        "btn_url",
        "btn_label",
        "btn_classes_2",
        "btn_url_2",
        "btn_label_2",
        "img_classes_3",
        "img_src",
        "img_alt",
    ]
    defaults = result.defaults()
    assert defaults["section_classes"] == "py-5 bg-light"
    assert defaults["subtitle"] == "Compose pages from ready-made blocks."
    assert defaults["btn_url_2"] == "/docs"
    assert "<!--" not in result.template
    assert '<a class="{{btn_classes}}" href="{{btn_url}}">{{btn_label}}</a>' in (
        result.template
    )


def test_class_labels_name_the_tag() -> None:
    result = _transform('<section class="py-5"></section>')
    assert result.fields[0].label == "Classes section"
    assert result.fields[0].type == "classes"


def test_plain_link_then_button_share_url_counter() -> None:
    result = _transform('<a href="/a">A</a><a class="btn" href="/b">B</a>')
    assert result.template == (
        '<a href="{{link_url}}">{{text}}</a>'
        '<a class="{{btn_classes}}" href="{{btn_url_2}}">{{btn_label}}</a>'
    )


def test_repeated_keys_keep_first_field_only() -> None:
    result = _transform("<h2>One</h2><h3>Two</h3><h3>Three</h3>")
    assert result.template == (
        "<h2>{{title}}</h2><h3>{{heading_h3}}</h3><h3>{{heading_h3}}</h3>"
    )
    assert [(f.key, f.default) for f in result.fields] == [
        ("title", "One"),
        ("heading_h3", "Two"),
    ]


def test_multiple_images_collapse_to_first() -> None:
    result = _transform('<img src="a.png"><img src="b.png">')
    assert result.template == '<img src="{{img_src}}" /><img src="{{img_src}}" />'
    assert result.defaults() == {"img_src": "a.png"}


def test_text_is_collapsed_and_trimmed_for_defaults() -> None:
    result = _transform("<p>\n   Hello\n   world\t</p>")
    assert result.template == "<p>{{text}}</p>"
    assert result.defaults() == {"text": "Hello world"}


def test_text_editing_disabled_keeps_collapsed_literal() -> None:
    result = _transform("<p>  Hello \n world </p>", text_editable=False)
    assert result.template == "<p> Hello world </p>"
    assert result.fields == []


def test_whitespace_only_text_is_collapsed_not_templated() -> None:
    result = _transform("<div>\n    <span>x</span>\n</div>")
    assert result.template == "<div> <span>{{text}}</span> </div>"
    assert _keys(result) == ["text"]


def test_root_level_text_stays_literal() -> None:
    result = _transform("Hello  <b>world</b>")
    assert result.template == "Hello <b>{{text}}</b>"


def test_non_editable_attributes_are_escaped_or_bare() -> None:
    result = _transform(
        """<input type="checkbox" checked data-x='a "b" & c'>""",
        attr_editable=frozenset(),
    )
    assert result.template == (
        '<input type="checkbox" checked data-x="a &quot;b&quot; &amp; c" />'
    )
    assert result.fields == []


def test_editable_attribute_on_other_tag() -> None:
    result = _transform('<abbr title="HyperText">HTML</abbr>')
    assert result.template == '<abbr title="{{abbr_title}}">{{text}}</abbr>'
    assert result.fields[0].as_dict() == {
        "key": "abbr_title",
        "type": "text",
        "label": "TITLE",
        "default": "HyperText",
    }


def test_url_like_data_attribute_is_text_typed() -> None:
    result = _transform(
        '<a data-href="/x">Go</a>', attr_editable=frozenset({"data-href"})
    )
    assert result.fields[0].key == "a_data-href"
    assert result.fields[0].type == "text"


def test_class_is_rendered_first() -> None:
    result = _transform('<a href="/x" class="nav-link" id="n">Go</a>')
    assert result.template == (
        '<a class="{{a_classes}}" href="{{link_url}}" id="n">{{text}}</a>'
    )


def test_empty_and_boolean_class_stay_literal() -> None:
    result = _transform('<div class=""><span class>x</span></div>')
    assert result.template == '<div class=""><span class>{{text}}</span></div>'
    assert _keys(result) == ["text"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ('say "hi"', "say &quot;hi&quot;"),
        ("a & b", "a &amp; b"),
        ("<tag>", "<tag>"),
    ],
)
def test_escape_attribute_only_touches_ampersand_and_quote(
    value: str, expected: str
) -> None:
    assert escape_attribute(value) == expected


def test_runs_do_not_share_state() -> None:
    transformer = HbsTransformer()
    tree = parse_html("<section class='a'><h1>T</h1><p>S</p></section>")
    first = transformer.transform(tree)
    second = transformer.transform(tree)
    assert first == second
    assert _keys(first) == ["section_classes", "title", "subtitle"]


def test_keys_are_unique_for_busy_fragment() -> None:
    markup = HERO_MARKUP * 3 + "<h2>a</h2><h2>b</h2><img src='z'><img src='y'>"
    keys = _keys(_transform(markup))
    assert len(keys) == len(set(keys))


@pytest.mark.parametrize(
    "markup",
    [
        HERO_MARKUP,
        '<div class="card"><div class="card-body"><h5 class="card-title">T</h5>'
        '<p class="card-text">Body <strong>bold</strong> tail</p>'
        '<a href="/more" class="card-link" title="More">More</a></div></div>',
        '<nav class="navbar"><ul><li><a href="/a">A</a></li>'
        '<li><a class="btn btn-sm" href="/b">B</a></li></ul></nav>',
    ],
)
def test_defaults_reproduce_source_structure(markup: str) -> None:
    """Substituting defaults back into the template restores the source shape."""
    result = _transform(markup)
    rendered = Environment(autoescape=False).from_string(result.template).render(
        **result.defaults()
    )
    assert _structure(rendered) == _structure(markup)
