from itemhelper.text import strip_tags, truncate


def test_short_text_unchanged():
    assert truncate("hello world") == "hello world"

def test_stops_after_limit_reached():
    assert truncate("hello world", 5) == "hello..."

def test_exact_length_still_gets_ellipsis():
    assert truncate("<b>hello</b>", 5) == "hello..."

def test_keeps_last_word_whole():
    assert truncate("the quick brown fox jumps", 12) == "the quick brown..."

def test_consecutive_spaces_kept():
    assert truncate("a  b c d", 4) == "a  b..."

def test_markup_is_stripped():
    assert truncate("<p>Some <em>intro</em> text</p>") == "Some intro text"

def test_default_limit_is_160():
    text = " ".join(["word"] * 50)  # 249 chars
    out = truncate(text)
    assert out.endswith("...")
    assert out == " ".join(["word"] * 32) + "..."

def test_none_is_empty():
    assert strip_tags(None) == ""
    assert truncate(None) == ""

def test_warning_filters_left_alone():
    import warnings
    before = list(warnings.filters)
    strip_tags("https://example.com/intro")
    assert warnings.filters == before
