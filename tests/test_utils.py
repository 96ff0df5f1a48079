import unittest
from lcsdiff.models import DiffComponent, DiffKind
from lcsdiff.utils import AlignmentUtils


class TestContentKeys(unittest.TestCase):
    def test_content_key(self):
        self.assertEqual(AlignmentUtils.content_key(((0, 2), (2, 3)), "abc"), ("a", "c"))
        self.assertEqual(AlignmentUtils.content_key((), "abc"), ())

    def test_dedupe_keeps_first(self):
        a = "aab"
        paths = [((0, 0),), ((1, 0),), ((2, 1),), ((1, 1),)]
        self.assertEqual(AlignmentUtils.dedupe_by_content(paths, a),
                         [((0, 0),), ((2, 1),)])

    def test_dedupe_unhashable(self):
        a = [[1], [1], [2]]
        paths = [((0, 0),), ((1, 0),), ((2, 0),)]
        self.assertEqual(AlignmentUtils.dedupe_by_content(paths, a),
                         [((0, 0),), ((2, 0),)])


class TestReconstruct(unittest.TestCase):
    def setUp(self):
        a = "axb"
        b = "abc"
        self.script = [
            DiffComponent.unchanged(a, b, 0, 0),
            DiffComponent.deletion(a, b, 1),
            DiffComponent.unchanged(a, b, 2, 1),
            DiffComponent.insertion(a, b, 2),
        ]

    def test_reconstruct(self):
        self.assertEqual(AlignmentUtils.reconstruct_a(self.script), ["a", "x", "b"])
        self.assertEqual(AlignmentUtils.reconstruct_b(self.script), ["a", "b", "c"])

    def test_filter(self):
        deletions = AlignmentUtils.filter_diff(self.script, DiffKind.DELETION)
        self.assertEqual([s.a_index for s in deletions], [1])
        self.assertEqual(len(AlignmentUtils.filter_diff(self.script)), 0)


if __name__ == '__main__':
    unittest.main()
