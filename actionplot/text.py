"""Whitespace and capitalisation helpers for action names."""


def normalize_whitespace(text: str) -> str:
    """Trim the text and collapse every run of whitespace into one space."""
    return " ".join(text.split())


def _is_kept_as_is(word: str) -> bool:
    return all(ch.isnumeric() or ch.isupper() for ch in word)


def _capitalize_word(word: str) -> str:
    if _is_kept_as_is(word):
        return word
    if word.startswith("("):
        # Nested parentheses are handled by recursing on the remainder.
        return "(" + capitalize_words(word[1:])
    return word[:1].upper() + word[1:].lower()


def capitalize_words(text: str) -> str:
    """Capitalise each word, leaving all-caps or numeric words untouched.

    Whitespace is normalised and stray spaces just inside parentheses are
    removed.
    """
    joined = " ".join(_capitalize_word(word) for word in text.split())
    return joined.replace(" ( ", " (").replace(" )", ")")