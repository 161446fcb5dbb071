from khipro.lexer import Lexer


def test_peek_does_not_consume():
    lexer = Lexer("ami")
    assert lexer.peek() == "a"
    assert lexer.peek(2) == "i"
    assert lexer.peek(3) is None
    assert lexer.peek(-1) is None
    assert lexer.pos == 0


def test_peek_chunk_stops_at_end():
    lexer = Lexer("kkh", pos=1)
    assert lexer.peek_chunk(1) == "k"
    assert lexer.peek_chunk(2) == "kh"
    assert lexer.peek_chunk(7) == "kh"
    assert lexer.pos == 1


def test_eat():
    lexer = Lexer("bangla")
    assert lexer.eat() == "b"
    assert lexer.eat(3) == "ang"
    assert lexer.remaining_length() == 2
    assert lexer.eat(10) == "la"
    assert lexer.at_end()
    assert lexer.eat() == ""


def test_remaining_length_past_end():
    lexer = Lexer("ami", pos=5)
    assert lexer.at_end()
    assert lexer.remaining_length() == 0
    assert lexer.peek_chunk(2) == ""


def test_empty_text():
    lexer = Lexer("")
    assert lexer.at_end()
    assert lexer.peek() is None
