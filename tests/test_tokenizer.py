from import_canonicalizer.tokenizer import Scanner
from import_canonicalizer.tokenizer import Token


def test_token_identity_is_its_text():
    a = Token(b"name", 0)
    b = Token(b"name", 42)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert Token(b"a", 9) < Token(b"b", 0)


def test_identifier_takes_maximal_run():
    s = Scanner(b"abc_1.x")
    token = s.identifier()
    assert token.text == b"abc_1"
    assert token.offset == 0
    assert s.pos == 5


def test_identifier_accepts_leading_digit():
    assert Scanner(b"9lives").identifier().text == b"9lives"


def test_identifier_no_match_keeps_cursor():
    s = Scanner(b" x")
    assert s.identifier() is None
    assert s.pos == 0


def test_comment_excludes_newline():
    s = Scanner(b"# hi\nx")
    assert s.comment().text == b"# hi"
    assert s.pos == 5


def test_comment_at_end_of_buffer():
    s = Scanner(b"# hi")
    assert s.comment().text == b"# hi"
    assert s.at_end()


def test_comment_requires_hash():
    s = Scanner(b"x # hi")
    assert s.comment() is None
    assert s.pos == 0


def test_whitespace_ignores_tabs():
    s = Scanner(b"  \n\tx")
    s.whitespace()
    assert s.pos == 3


def test_literal():
    s = Scanner(b"import x")
    assert not s.literal(b"from")
    assert s.pos == 0
    assert s.literal(b"import")
    assert s.pos == 6


def test_keyword_needs_boundary():
    s = Scanner(b"importlib")
    assert not s.keyword(b"import")
    assert s.pos == 0
    assert Scanner(b"import(").keyword(b"import")


def test_backtrack_restores_cursor():
    s = Scanner(b"abc")

    def rule():
        s.literal(b"ab")
        return None

    assert s.backtrack(rule) is None
    assert s.pos == 0
    assert s.backtrack(lambda: s.identifier()).text == b"abc"
    assert s.pos == 3
