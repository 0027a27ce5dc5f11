from twisted.trial import unittest

from keys.chainpath import ChainPath, SubPath, parse_segment
from keys.errors import InvalidChainPath, BlankSubPath, KeyIndexOutOfRange, ChainPathError
from keys.keyindex import KeyIndex


def child(i):
    return SubPath.child(KeyIndex.from_index(i))


class ChainPathTest(unittest.TestCase):

    def test_root_only(self):
        self.assertEqual(list(ChainPath("m")), [SubPath.ROOT])

    def test_children(self):
        self.assertEqual(list(ChainPath("m/0/1")), [SubPath.ROOT, child(0), child(1)])
        self.assertEqual(list(ChainPath("m/44/0")), [SubPath.ROOT, child(44), child(0)])

    def test_largest_normal_index(self):
        self.assertEqual(list(ChainPath("m/2147483647")), [SubPath.ROOT, child(2147483647)])

    def test_blank_segment(self):
        steps = ChainPath("m//1").iter()
        self.assertEqual(next(steps), SubPath.ROOT)
        self.assertRaises(BlankSubPath, next, steps)

    def test_trailing_separator_is_blank(self):
        self.assertRaises(BlankSubPath, list, ChainPath("m/0/"))

    def test_empty_path_is_blank(self):
        self.assertRaises(BlankSubPath, list, ChainPath(""))

    def test_invalid_segment(self):
        e = self.assertRaises(InvalidChainPath, list, ChainPath("m/abc"))
        self.assertEqual(e.segment, "abc")
        self.assertTrue(isinstance(e, ChainPathError))

    def test_invalid_numerals(self):
        for segment in ("-1", "+1", " 1", "1 ", "1_000", "0x10", "M", "1.5", "١", "1\n", "1\n'", "0\nH"):
            self.assertRaises(InvalidChainPath, parse_segment, segment)

    def test_index_too_large_for_32_bits(self):
        self.assertRaises(InvalidChainPath, parse_segment, "4294967296")

    def test_index_out_of_normal_range(self):
        e = self.assertRaises(KeyIndexOutOfRange, parse_segment, "2147483648")
        self.assertEqual(e.index, 2147483648)
        e = self.assertRaises(KeyIndexOutOfRange, parse_segment, "4294967295")
        self.assertEqual(e.index, 4294967295)

    def test_hardened_segments_are_rejected(self):
        for segment in ("0H", "0'"):
            e = self.assertRaises(KeyIndexOutOfRange, parse_segment, segment)
            self.assertEqual(e.index, 2147483648)
        self.assertRaises(KeyIndexOutOfRange, parse_segment, "44'")

    def test_hardened_numeral_already_out_of_range(self):
        for segment in ("2147483648H", "4294967295'"):
            e = self.assertRaises(KeyIndexOutOfRange, parse_segment, segment)
            self.assertEqual(e.index, int(segment[:-1]))
            self.assertTrue(e.index <= 2 ** 32 - 1)

    def test_hardened_marker_without_numeral(self):
        self.assertRaises(InvalidChainPath, parse_segment, "'")
        self.assertRaises(InvalidChainPath, parse_segment, "H")
        self.assertRaises(InvalidChainPath, parse_segment, "aH")
        self.assertRaises(InvalidChainPath, parse_segment, "0HH")

    def test_root_symbol_anywhere(self):
        self.assertEqual(list(ChainPath("m/m")), [SubPath.ROOT, SubPath.ROOT])

    def test_path_without_root_parses(self):
        self.assertEqual(list(ChainPath("0/1")), [child(0), child(1)])

    def test_errors_are_left_to_right(self):
        steps = ChainPath("m/1/abc//").iter()
        self.assertEqual(next(steps), SubPath.ROOT)
        self.assertEqual(next(steps), child(1))
        self.assertRaises(InvalidChainPath, next, steps)

    def test_segment_scanning(self):
        self.assertEqual(list(ChainPath("m/10/200/3000")),
                         [SubPath.ROOT, child(10), child(200), child(3000)])
        steps = ChainPath("m/0/").iter()
        self.assertEqual(next(steps), SubPath.ROOT)
        self.assertEqual(next(steps), child(0))
        self.assertRaises(BlankSubPath, next, steps)
        steps = ChainPath("/").iter()
        self.assertRaises(BlankSubPath, next, steps)

    def test_iteration_is_lazy(self):
        steps = ChainPath("m/0/abc").iter()
        self.assertEqual(next(steps), SubPath.ROOT)
        self.assertEqual(next(steps), child(0))
        self.assertRaises(InvalidChainPath, next, steps)
        self.assertRaises(StopIteration, next, steps)

    def test_iteration_is_restartable(self):
        path = ChainPath("m/3/4")
        self.assertEqual(list(path.iter()), list(path.iter()))
        self.assertEqual(len(list(path)), 3)

    def test_string_conversion(self):
        path = ChainPath("m/0/1")
        self.assertEqual(str(path), "m/0/1")
        self.assertEqual(ChainPath(path), path)
        self.assertNotEqual(ChainPath("m/0"), path)
        self.assertRaises(TypeError, ChainPath, 12)

    def test_subpath_repr(self):
        self.assertEqual(repr(SubPath.ROOT), "Root")
        self.assertEqual(repr(child(7)), "Child(Normal(7))")
