import warnings
from typing import Optional
from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from itemhelper.settings import DEFAULT_TRUNCATE_LIMIT, ELLIPSIS


def strip_tags(text: Optional[str]) -> str:
    """Drop markup tags and keep the text inside them."""
    if not text:
        return ""
    with warnings.catch_warnings():
        # intro texts are often a bare URL or file name; that's fine to parse
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(text, "html.parser").get_text()


def truncate(text: Optional[str], limit: int = DEFAULT_TRUNCATE_LIMIT) -> str:
    """
    Shorten `text` to about `limit` characters without breaking a word.

    Markup is stripped first. Text shorter than `limit` comes back as-is;
    anything else gets "..." appended, even at exactly `limit` characters.
    The result can run past `limit` because the last word is kept whole.
    """
    text = strip_tags(text)
    if len(text) < limit:
        return text

    kept = []
    counter = 0
    # split on single spaces: runs of spaces give empty words, which are kept
    for word in text.split(" "):
        if counter >= limit:
            break
        kept.append(word)
        counter += len(word) + 1  # +1 for the space after the word

    return " ".join(kept) + ELLIPSIS
