import unittest

from bnfront.grammar.stream import CharacterStream, Position, is_whitespace


class TestConsume(unittest.TestCase):
    def test_position_tracks_lines(self) -> None:
        s = CharacterStream("a\nb")
        self.assertEqual(s.consume(), "a")
        self.assertEqual(s.position, Position(1, 0, 1))
        self.assertEqual(s.consume(), "\n")
        self.assertEqual(s.position, Position(2, 1, 0))
        self.assertEqual(s.consume(), "b")
        self.assertEqual(s.position, Position(3, 1, 1))

    def test_eof_does_not_move(self) -> None:
        s = CharacterStream("x")
        s.consume()
        self.assertIsNone(s.peek())
        self.assertIsNone(s.consume())
        self.assertEqual(s.position, Position(1, 0, 1))

    def test_whitespace_set(self) -> None:
        self.assertTrue(is_whitespace(" "))
        self.assertTrue(is_whitespace("\t"))
        self.assertTrue(is_whitespace("\x00"))
        self.assertTrue(is_whitespace("\x7f"))
        self.assertFalse(is_whitespace("a"))
        self.assertFalse(is_whitespace(None))

    def test_consume_whitespace(self) -> None:
        s = CharacterStream(" \t\r\n\x7fz")
        s.consume_whitespace()
        self.assertEqual(s.peek(), "z")
        self.assertEqual(s.position, Position(5, 1, 1))


class TestCheckpoints(unittest.TestCase):
    def test_guard_restores_by_default(self) -> None:
        s = CharacterStream("abc")
        with s.guard():
            s.consume()
            s.consume()
        self.assertEqual(s.position, Position())
        self.assertEqual(s.depth, 0)

    def test_guard_commit_keeps_position(self) -> None:
        s = CharacterStream("abc")
        with s.guard() as g:
            s.consume()
            g.commit()
        self.assertEqual(s.position.offset, 1)
        self.assertEqual(s.depth, 0)

    def test_guard_restores_on_exception(self) -> None:
        s = CharacterStream("abc")
        with self.assertRaises(ValueError):
            with s.guard():
                s.consume()
                raise ValueError("boom")
        self.assertEqual(s.position.offset, 0)
        self.assertEqual(s.depth, 0)

    def test_nested_guards(self) -> None:
        s = CharacterStream("abcd")
        with s.guard() as outer:
            s.consume()
            with s.guard():
                s.consume()
            self.assertEqual(s.position.offset, 1)
            with s.guard() as inner:
                s.consume()
                inner.commit()
            outer.commit()
        self.assertEqual(s.position.offset, 2)

    def test_out_of_order_release(self) -> None:
        s = CharacterStream("ab")
        outer = s.guard()
        inner = s.guard()
        with self.assertRaises(RuntimeError):
            outer.commit()
        inner.restore()
        outer.restore()
        self.assertEqual(s.depth, 0)


class TestTokenHelpers(unittest.TestCase):
    def test_consume_str(self) -> None:
        s = CharacterStream("  ab")
        self.assertFalse(s.consume_str("ac"))
        self.assertEqual(s.position.offset, 0)
        self.assertTrue(s.consume_str("ab"))
        self.assertEqual(s.position.offset, 4)

    def test_consume_str_without_whitespace_skip(self) -> None:
        s = CharacterStream(" ab")
        self.assertFalse(s.consume_str("ab", skip_ws=False))
        self.assertEqual(s.position.offset, 0)

    def test_peek_str_never_moves(self) -> None:
        s = CharacterStream("  ->")
        self.assertTrue(s.peek_str("->"))
        self.assertFalse(s.peek_str("=>"))
        self.assertEqual(s.position.offset, 0)

    def test_char_helpers(self) -> None:
        s = CharacterStream(" |x")
        self.assertTrue(s.peek_char("|"))
        self.assertFalse(s.peek_char("|", skip_ws=False))
        self.assertFalse(s.consume_char("x"))
        self.assertTrue(s.consume_char("|"))
        self.assertEqual(s.peek(), "x")

    def test_consume_eof(self) -> None:
        s = CharacterStream(" a")
        self.assertFalse(s.consume_eof())
        self.assertEqual(s.position.offset, 0)
        s = CharacterStream(" \n ")
        self.assertTrue(s.consume_eof())
        self.assertEqual(s.position.offset, 3)

    def test_identifier(self) -> None:
        s = CharacterStream("  foo_bar-9 x")
        self.assertEqual(s.consume_identifier(), "foo_bar-9")
        self.assertEqual(s.position.offset, 11)

    def test_identifier_cannot_start_with_digit(self) -> None:
        s = CharacterStream("9abc")
        self.assertIsNone(s.consume_identifier())
        self.assertEqual(s.position.offset, 0)

    def test_identifier_at_eof(self) -> None:
        s = CharacterStream("   ")
        self.assertIsNone(s.consume_identifier())
        self.assertEqual(s.position.offset, 0)

    def test_helpers_leave_no_checkpoints(self) -> None:
        s = CharacterStream("foo -> 'x'")
        s.consume_identifier()
        s.peek_str("->")
        s.consume_str("->")
        s.consume_char("[")
        s.consume_eof()
        self.assertEqual(s.depth, 0)

    def test_line_text(self) -> None:
        s = CharacterStream("one\ntwo")
        self.assertEqual(s.line_text(1), "two")
        self.assertEqual(s.line_text(5), "")
