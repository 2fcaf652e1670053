def normalize_answer(text: str | None) -> str:
    """Canonical form used to compare answers.

    Surrounding whitespace is removed and the text is case folded, which
    treats Latin and Cyrillic letters the same way regardless of locale.
    Diacritics are kept: "ł" and "l" are different answers.
    """
    if text is None:
        return ""
    return text.strip().casefold()


def answers_match(provided: str | None, expected: str | None) -> bool:
    canonical = normalize_answer(provided)
    # stored words are never blank, so a blank answer can't be right
    if not canonical:
        return False
    return canonical == normalize_answer(expected)
