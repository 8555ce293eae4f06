import pytest

from actionplot.text import capitalize_words, normalize_whitespace


@pytest.mark.parametrize(
    "text, expected",
    [
        ("   Hello   World   ", "Hello World"),
        ("Rust    is     awesome!", "Rust is awesome!"),
        ("", ""),
        ("      ", ""),
        ("Hello\t\tWorld\n\nRust    ", "Hello World Rust"),
    ],
)
def test_normalize_whitespace(text, expected):
    assert normalize_whitespace(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "Hello World"),
        ("   rust is awesome   ", "Rust Is Awesome"),
        ("multiple   spaces   here", "Multiple Spaces Here"),
        ("", ""),
        ("   ", ""),
        ("already Capitalized", "Already Capitalized"),
        ("single", "Single"),
        ("123 testing numbers", "123 Testing Numbers"),
        ("Defib (UNsynchronized Shock) 200J", "Defib (Unsynchronized Shock) 200J"),
        (" Defib   ( UNsynchronized   Shock  )   100J ", "Defib (Unsynchronized Shock) 100J"),
        ("(parentheses) around words", "(Parentheses) Around Words"),
        ("punctuation, should work!", "Punctuation, Should Work!"),
        ("100j test", "100j Test"),
        ("Order EKG", "Order EKG"),
        ("  Order  EKG    test  ", "Order EKG Test"),
    ],
)
def test_capitalize_words(text, expected):
    assert capitalize_words(text) == expected


def test_capitalize_words_is_idempotent():
    once = capitalize_words(" Defib   ( UNsynchronized   Shock  )   100J ")
    assert capitalize_words(once) == once


def test_normalize_whitespace_is_idempotent():
    once = normalize_whitespace("  a \t b \n c ")
    assert normalize_whitespace(once) == once