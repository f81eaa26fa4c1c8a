from __future__ import annotations

from mfemap.core.selector import generate_selector
from tests.helpers import node_for


def test_id_takes_priority():
    node = node_for('<input id="email" name="email" aria-label="Email">')
    assert generate_selector(node, "textbox") == '[role="textbox"]#email'


def test_name_is_used_for_inputs_and_selects_only():
    assert generate_selector(node_for('<select name="country"></select>'), "combobox") == (
        '[role="combobox"][name="country"]'
    )
    assert generate_selector(node_for('<button name="go">Go</button>'), "button") == 'button[role="button"]'


def test_label_quotes_are_escaped():
    node = node_for('<button aria-label=\'Say "hi"\'>Hi</button>')
    assert generate_selector(node, "button") == '[role="button"][aria-label="Say \\"hi\\""]'


def test_blank_label_falls_back_to_tag_and_role():
    assert generate_selector(node_for('<a href="#" aria-label=" ">x</a>'), "link") == 'a[role="link"]'
