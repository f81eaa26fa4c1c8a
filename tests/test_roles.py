from __future__ import annotations

import pytest

from mfemap.core.roles import resolve_name, resolve_role
from tests.helpers import node_for


@pytest.mark.parametrize(
    ("markup", "expected"),
    [
        ('<div role="tab">Tab</div>', "tab"),
        ('<button role="link">Go</button>', "link"),
        ("<button>Go</button>", "button"),
        ('<a href="/home">Home</a>', "link"),
        ("<input>", "textbox"),
        ('<input type="email">', "textbox"),
        ('<input type="SUBMIT">', "button"),
        ('<input type="reset">', "button"),
        ('<input type="checkbox">', "checkbox"),
        ('<input type="radio">', "radio"),
        ("<select></select>", "combobox"),
        ("<textarea></textarea>", "textbox"),
        ('<div onclick="go()">Go</div>', "button"),
        ('<span tabindex="0">Go</span>', "button"),
        ("<div>Plain</div>", "generic"),
        ('<div role="">Empty role</div>', "generic"),
    ],
)
def test_role_resolution(markup, expected):
    assert resolve_role(node_for(markup)) == expected


def test_label_attribute_beats_text_content():
    assert resolve_name(node_for('<button aria-label="Submit">Go</button>')) == "Submit"
    assert resolve_name(node_for("<button>  Go  </button>")) == "Go"


def test_blank_label_is_ignored():
    assert resolve_name(node_for('<a href="#" aria-label="   ">Docs</a>')) == "Docs"


def test_text_content_only_counts_for_links_and_buttons():
    assert resolve_name(node_for('<div role="button" title="Close">Visible</div>')) == "Close"


def test_placeholder_then_title_then_value_for_inputs():
    assert resolve_name(node_for('<input placeholder="Email" title="Your email" value="a@b.c">')) == "Email"
    assert resolve_name(node_for('<input title="Your email" value="a@b.c">')) == "Your email"
    assert resolve_name(node_for('<input type="submit" value=" Send ">')) == "Send"
    assert resolve_name(node_for('<textarea placeholder="Comment"></textarea>')) == "Comment"


def test_value_is_ignored_outside_inputs():
    assert resolve_name(node_for('<button value="x"></button>')) == "button"


def test_image_alt_text_names_icon_buttons():
    assert resolve_name(node_for('<button><img src="cart.svg" alt="Cart"></button>')) == "Cart"


def test_fallback_is_lower_case_tag_name():
    assert resolve_name(node_for("<SELECT></SELECT>")) == "select"


def test_unvalued_toggle_inputs_are_named_on():
    assert resolve_name(node_for('<input type="checkbox">')) == "on"
    assert resolve_name(node_for('<input type="RADIO">')) == "on"
    assert resolve_name(node_for('<input type="radio" value="express">')) == "express"
    assert resolve_name(node_for('<input type="checkbox" value="">')) == "input"
    assert resolve_name(node_for("<input>")) == "input"
