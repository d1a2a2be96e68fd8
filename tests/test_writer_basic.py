import json

from respack.writer import JsonWriter, format_number


def _doc(build, **kwargs) -> str:
    w = JsonWriter(**kwargs)
    build(w)
    return w.close()


def test_keys_keep_call_order():
    text = _doc(
        lambda w: w.start_object()
        .key("b").value(1)
        .key("a").value("x")
        .end_object()
    )
    assert text == '{"b":1,"a":"x"}'


def test_nested_scopes():
    text = _doc(
        lambda w: w.start_object()
        .key("pack").start_object()
        .key("list").start_array().value(1).start_object().end_object().end_array()
        .end_object()
        .end_object()
    )
    assert text == '{"pack":{"list":[1,{}]}}'


def test_string_escaping_and_unicode():
    text = _doc(
        lambda w: w.start_object().key('q"k').value('he said "hi"\n\u00e9').end_object()
    )
    assert text == '{"q\\"k":"he said \\"hi\\"\\n\u00e9"}'
    assert json.loads(text) == {'q"k': 'he said "hi"\n\u00e9'}


def test_root_scalar_document():
    assert _doc(lambda w: w.value("minecraft:block/stone")) == (
        '"minecraft:block/stone"'
    )


def test_sink_receives_utf8_once():
    chunks = []
    w = JsonWriter(chunks.append)
    w.start_object().key("name").value("\u00e9").end_object()
    assert chunks == []
    w.close()
    assert chunks == ['{"name":"\u00e9"}'.encode("utf-8")]


def test_number_formatting():
    assert format_number(16) == "16"
    assert format_number(-3) == "-3"
    assert format_number(2**40) == "1099511627776"
    assert format_number(0.1) == "0.1"
    assert format_number(1.0) == "1.0"
    assert format_number(0.625) == "0.625"
    assert format_number(1e-05) == "0.00001"
    assert format_number(1e16) == "10000000000000000.0"
    assert format_number(True) == "true"
    assert format_number(False) == "false"


def test_booleans_are_not_numbers():
    text = _doc(
        lambda w: w.start_object()
        .key("t").value(True)
        .key("one").value(1)
        .end_object()
    )
    assert text == '{"t":true,"one":1}'


def test_inline_array():
    text = _doc(
        lambda w: w.start_object()
        .key("from").value([0, 8.5, 16])
        .key("chars").value(("ab", "cd"))
        .key("empty").value([])
        .end_object()
    )
    assert text == '{"from":[0,8.5,16],"chars":["ab","cd"],"empty":[]}'


def test_pretty_mode_is_cosmetic():
    def build(w):
        (
            w.start_object()
            .key("a").value(1)
            .key("b").start_array().value(1).value(2).end_array()
            .key("c").start_object().end_object()
            .key("d").value([1, 2])
            .end_object()
        )

    compact = _doc(build)
    pretty = _doc(build, indent=2)
    assert pretty == (
        '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ],\n'
        '  "c": {},\n  "d": [1, 2]\n}'
    )
    assert json.loads(pretty) == json.loads(compact)


def test_state_properties():
    w = JsonWriter()
    assert not w.complete
    w.start_object().key("k").start_array()
    assert w.depth == 2
    w.end_array().end_object()
    assert w.depth == 0
    assert w.complete
    assert not w.closed
    w.close()
    assert w.closed
