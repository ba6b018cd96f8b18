import io
import unittest

from mbstats.histogram import Histogram


def render(hist, label_width=0, bar_width=60):
    out = io.StringIO()
    hist.write(out, label_width, bar_width)
    return out.getvalue()


class HistogramBucketTests(unittest.TestCase):
    def test_even_buckets(self) -> None:
        hist = Histogram(1, 100, 10)
        self.assertEqual(hist.step, 10.0)
        self.assertEqual([(b.lo, b.hi) for b in hist.buckets][:3], [(1, 10), (11, 20), (21, 30)])
        self.assertEqual((hist.buckets[-1].lo, hist.buckets[-1].hi), (91, 100))

        hist.add(13)
        self.assertEqual([b.count for b in hist.buckets], [0, 1, 0, 0, 0, 0, 0, 0, 0, 0])

    def test_truncated_boundaries(self) -> None:
        hist = Histogram(4, 50, 10)
        self.assertEqual([b.lo for b in hist.buckets], [4, 8, 13, 18, 22, 27, 32, 36, 41, 46])
        self.assertEqual(hist.buckets[-1].hi, 50)

        # (13 - 4) / 4.7 truncates to 1, but 13 starts bucket 2.
        hist.add(13)
        self.assertEqual(hist.buckets[2].count, 1)
        hist.add(12)
        self.assertEqual(hist.buckets[1].count, 1)

    def test_buckets_are_contiguous(self) -> None:
        for lo, hi, n in ((1, 100, 10), (4, 50, 10), (1, 3, 10), (-5, 5, 3), (1, 100, 7), (0, 0, 1)):
            with self.subTest(lo=lo, hi=hi, n=n):
                hist = Histogram(lo, hi, n)
                self.assertEqual(len(hist.buckets), n)
                self.assertEqual(hist.buckets[0].lo, lo)
                for prev, cur in zip(hist.buckets, hist.buckets[1:]):
                    self.assertEqual(cur.lo, prev.hi + 1)

    def test_each_value_lands_in_one_place(self) -> None:
        for lo, hi, n in ((1, 100, 10), (4, 50, 10), (1, 3, 10), (-5, 5, 3), (1, 100, 7), (10, 12, 5), (0, 0, 1)):
            for value in range(lo - 2, hi + 3):
                with self.subTest(lo=lo, hi=hi, n=n, value=value):
                    hist = Histogram(lo, hi, n)
                    hist.add(value)
                    self.assertEqual(hist.total, 1)
                    if value < hist.buckets[0].lo:
                        self.assertEqual(hist.underflow, 1)
                    elif value > hist.buckets[-1].hi:
                        self.assertEqual(hist.overflow, 1)
                    else:
                        hits = [b for b in hist.buckets if b.count]
                        self.assertEqual(len(hits), 1)
                        self.assertTrue(hits[0].lo <= value <= hits[0].hi)

    def test_very_wide_range_top_value(self) -> None:
        # float(2**55 - 1) rounds to 2**55, so the direct index is num_buckets.
        hist = Histogram(0, 2**55 - 1, 2)
        hist.add(2**55 - 1)
        self.assertEqual([b.count for b in hist.buckets], [0, 1])
        self.assertEqual(hist.overflow, 0)

    def test_underflow_and_overflow(self) -> None:
        hist = Histogram(1, 100, 10)
        for value in (0, -3, 101, 500, 50):
            hist.add(value)
        self.assertEqual(hist.underflow, 2)
        self.assertEqual(hist.overflow, 2)
        self.assertEqual(hist.total, 5)

    def test_invalid_shapes(self) -> None:
        with self.assertRaises(ValueError):
            Histogram(1, 100, 0)
        with self.assertRaises(ValueError):
            Histogram(10, 9, 1)


class HistogramWriteTests(unittest.TestCase):
    def test_full_rendering(self) -> None:
        hist = Histogram(1, 4, 2)
        for value in (1, 2, 3, 0, 9, 9):
            hist.add(value)
        self.assertEqual(render(hist, bar_width=4), " <1 |## 1\n1-2 |#### 2\n3-4 |## 1\n >4 |#### 2\n")

    def test_single_value_labels(self) -> None:
        hist = Histogram(1, 3, 3)
        hist.add(2)
        self.assertEqual(render(hist, bar_width=3), " 1 | 0\n 2 |### 1\n 3 | 0\n")

    def test_bars_round_half_up(self) -> None:
        hist = Histogram(1, 2, 2)
        hist.add(1)
        for _ in range(8):
            hist.add(2)
        self.assertEqual(render(hist, bar_width=4), " 1 |# 1\n 2 |#### 8\n")

    def test_empty_histogram(self) -> None:
        self.assertEqual(render(Histogram(1, 2, 1)), "1-2 | 0\n")

    def test_minimum_label_width(self) -> None:
        hist = Histogram(1, 2, 1)
        hist.add(1)
        self.assertEqual(render(hist, label_width=6, bar_width=2), "   1-2 |## 1\n")

    def test_default_bar_width(self) -> None:
        hist = Histogram(1, 100, 10)
        hist.add(5)
        lines = render(hist).splitlines()
        self.assertEqual(lines[0], "  1-10 |" + "#" * 60 + " 1")
        self.assertEqual(lines[1], " 11-20 | 0")


if __name__ == "__main__":
    unittest.main()
