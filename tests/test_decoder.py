from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from morse_tree_decoder.decoder import (
    MorseDecoder,
    Token,
    TokenKind,
    collapse_whitespace,
    decode_message,
    fold_word_boundaries,
    normalise_text,
    prepare_tokens,
    tokenize,
)
from morse_tree_decoder.symbols import build_tree


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("... --- ...", "SOS"),
        ("… --- …", "SOS"),
        (".... . .-.. .-.. --- / .-- --- .-. .-.. -..", "HELLO WORLD"),
        (".- -... -.-.", "ABC"),
        (".- .......", "A?"),
        ("", ""),
        ("   ", ""),
        ("\t\n  ", ""),
    ],
)
def test_reference_messages(raw, expected):
    assert decode_message(raw) == expected


def test_long_blank_run_becomes_word_gap():
    assert decode_message(".... ..   .-- --- .-. .-.. -..") == "HI WORLD"
    assert decode_message(".... ..\t\t\t.. -") == "HI IT"


def test_single_and_double_spaces_only_separate_letters():
    assert decode_message(".-  -...") == "AB"
    assert decode_message(".- -...") == "AB"


def test_unicode_variants_are_normalised():
    assert decode_message("•— –··· −∙−⋅") == "ABC"
    assert decode_message("._ _...") == "AB"


def test_letters_and_digits_are_dropped_before_decoding():
    assert decode_message("abc ... --- ... xyz") == "SOS"
    assert decode_message(".x- -...") == "AB"


def test_mixed_slash_token_fails_as_a_whole():
    assert decode_message(".-/ -...") == "?B"


def test_incomplete_path_yields_placeholder():
    # ".-.-" is an internal node on the way to "+" and "." but holds no symbol.
    assert decode_message(".-.- .-") == "?A"


def test_separator_only_message_decodes_to_spaces():
    assert decode_message("/") == " "
    assert decode_message("/ /") == "  "


def test_decode_is_total_for_arbitrary_text():
    for raw in ["hello", "////", "-" * 40, "…" * 10, "?!@#", ". - /   　"]:
        result = decode_message(raw)
        assert isinstance(result, str)


def test_normalise_text_is_idempotent():
    raw = "Msg: …—• _ · / 123 −–"
    once = normalise_text(raw)
    assert normalise_text(once) == once
    assert once == " ...-. - . /  --"


def test_fold_then_collapse():
    folded = fold_word_boundaries(".-    -...")
    assert folded == ".- / -..."
    assert collapse_whitespace("  .-  \t -  ") == ".- -"


def test_tokenize_classifies_tokens():
    assert tokenize(".- / -") == [
        Token(TokenKind.LETTER, ".-"),
        Token(TokenKind.SEPARATOR, "/"),
        Token(TokenKind.LETTER, "-"),
    ]
    assert tokenize("") == []


def test_prepare_tokens_runs_full_pipeline():
    tokens = prepare_tokens("  ...   —  ")
    assert [token.kind for token in tokens] == [TokenKind.LETTER, TokenKind.SEPARATOR, TokenKind.LETTER]


def test_decoder_with_custom_tree_and_placeholder():
    tree = build_tree(extra={"'": ".----."}).freeze()
    decoder = MorseDecoder(tree, placeholder="*")
    assert decoder.decode(".----. ......") == "'*"
    assert decode_message(".----.", tree) == "'"
    assert decode_message(".----.") == "?"


def test_decode_tokens_assembles_without_trimming():
    decoder = MorseDecoder()
    tokens = [Token(TokenKind.SEPARATOR, "/"), Token(TokenKind.LETTER, "..."), Token(TokenKind.SEPARATOR, "/")]
    assert decoder.decode_tokens(tokens) == " S "


def test_empty_placeholder_is_rejected():
    with pytest.raises(ValueError):
        MorseDecoder(placeholder="")
