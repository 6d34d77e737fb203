import random

from termmask.term.input_keys import EscapeCodeDecoder, KEY_MAP


def test_all_keys_are_tuple():
    for key, val in KEY_MAP.items():
        assert isinstance(key, str), f"{repr(key)} not a string"
        assert isinstance(val, tuple), f"{repr(key)} value not tuple"
        assert all(
            isinstance(v, str) for v in val
        ), f"{repr(key)} sub-values not all str"


def test_reserved_keys_are_mapped():
    assert KEY_MAP["\r"] == ("enter",)
    assert KEY_MAP["\x1b"] == ("escape",)
    assert KEY_MAP["\x08"] == ("backspace",)
    assert KEY_MAP["\x7f"] == ("backspace",)


def test_escape_code_decoder():

    keys = list(KEY_MAP.keys())

    # Remove the bare escape code, because there are many ambiguous
    # cases that would otherwise cause this test to fail. We test some
    # of these cases separately.
    keys.remove("\x1b")
    keys.remove("\x1b\x1b")

    for sep in ["", " ", "a"]:
        compare_with_keys(keys, sep)
        compare_with_keys(reversed(keys), sep)

        for _ in range(200):
            random_keys = [random.choice(keys) for _ in range(50)]
            compare_with_keys(random_keys, sep)


def test_escape_code_decoder_ambiguous_cases():

    # Double-escapes should be treated as single, because
    # "Windows issues esc esc for a single press of escape key"
    check_decoder(" \x1b ", [" ", "escape", " "])
    check_decoder(" \x1b\x1b ", [" ", "escape", " "])
    check_decoder(" \x1b\x1b\x1b ", [" ", "escape", "escape", " "])

    # This one is easily interpreted wrong
    check_decoder(" \x1b\x1b[[D", [" ", "escape", "f4"])

    # An arrow key must not leak characters into a password
    check_decoder("ab\x1b[Dc", ["a", "b", "left", "c"])


def test_escape_code_decoder_partial():
    # As a whole
    decoder = EscapeCodeDecoder()
    assert decoder.decode("\x1b[A") == ["up"]
    assert not decoder.pending

    # Char by char
    decoder = EscapeCodeDecoder()
    assert decoder.decode("\x1b") == []
    assert decoder.pending
    assert decoder.decode("[") == []
    assert decoder.decode("A") == ["up"]
    assert not decoder.pending

    # A lone escape is only resolved on flush
    decoder = EscapeCodeDecoder()
    assert decoder.decode("\x1b") == []
    assert decoder.decode("", True) == ["escape"]
    assert not decoder.pending

    # Char by char, with flushes
    decoder = EscapeCodeDecoder()
    assert decoder.decode("\x1b", True) == ["escape"]
    assert decoder.decode("[", True) == ["["]
    assert decoder.decode("A", True) == ["A"]


def test_escape_code_decoder_unknown_sequences():
    # Not in the map: dropped as a whole, nothing leaks as characters
    check_decoder("ab\x1b[1;7Pc", ["a", "b", "c"])
    check_decoder("ab\x1b[99;2~c", ["a", "b", "c"])
    check_decoder("ab\x1bOXc", ["a", "b", "c"])
    check_decoder("ab\x1b[[Zc", ["a", "b", "c"])

    # Modified keys that are in the map
    check_decoder("ab\x1b[1;5Hc", ["a", "b", "ctrl+home", "c"])
    check_decoder("ab\x1b[1;2Pc", ["a", "b", "f13", "c"])
    check_decoder("ab\x1b[15;2~c", ["a", "b", "f17", "c"])

    # An unknown sequence split over multiple calls
    decoder = EscapeCodeDecoder()
    assert decoder.decode("a\x1b[99;") == ["a"]
    assert decoder.pending
    assert decoder.decode("2~b") == ["b"]
    assert not decoder.pending

    # An unfinished unknown sequence is dropped on flush
    decoder = EscapeCodeDecoder()
    assert decoder.decode("\x1b[99;", True) == []
    assert not decoder.pending
    assert decoder.decode("x") == ["x"]


def test_escape_code_decoder_alt_keys():
    check_decoder("\x1bx", ["alt+x"])
    check_decoder("ab\x1bxc", ["a", "b", "alt+x", "c"])
    check_decoder("\x1b1", ["¡"])  # WezTerm sends option+1 like this
    check_decoder("\x1b[1;3A", ["alt+up"])
    check_decoder("\x1b[1;7A", ["alt+ctrl+up"])

    # Escape followed by a control key or space is still an escape
    check_decoder("\x1b\r", ["escape", "enter"])
    check_decoder("\x1b ", ["escape", " "])

    # Alt+[ and alt+O, once it is clear no sequence follows
    check_decoder("\x1b[", ["alt+["])
    check_decoder("\x1bO", ["alt+O"])

    # No key in the map produces a bare escape plus something else
    for key, val in KEY_MAP.items():
        if len(val) > 1:
            assert "escape" not in val, repr(key)


def compare_with_keys(keys, sep=""):

    input = ""
    expected = []

    for key in keys:
        input += key
        expected.extend(KEY_MAP[key])
        input += sep
        for s in sep:
            expected.append(s)

    check_decoder(input, expected)


def check_decoder(input, expected):
    decoder = EscapeCodeDecoder()
    result = decoder.decode(input, flush=True)

    info = "decoded result differs from expectation:\n\n"
    info += "input: " + repr(input) + "\n\n"
    if result != expected:
        info += f"  {'RESULT':>12}  EXPECTED\n\n"
        for v1, v2 in zip(result, expected):
            info += "X "[v1 == v2] + f" {v1:>12}  {v2}\n"
        for v1 in result[len(expected):]:
            info += f"+ {v1:>12}  \n"
        for v2 in expected[len(result):]:
            info += f"- {'':>12}  {v2}\n"
    assert result == expected, info


if __name__ == "__main__":
    test_escape_code_decoder_partial()
    test_escape_code_decoder()
    test_escape_code_decoder_ambiguous_cases()
