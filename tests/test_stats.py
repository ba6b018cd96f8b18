import unittest
from datetime import UTC, datetime

import numpy as np

from mbstats.stats import (
    EditTypeCount,
    average_account_age,
    count_edit_types,
    count_editors,
    edit_type_correlations,
    edit_type_counts,
    editor_histogram,
    editors_with_type,
    pearson,
    yearly_average_age,
    yearly_editors,
    yearly_edits,
)
from mbstats.summaries import EditorStats, YearSummary

CREATED_2015 = datetime(2015, 6, 1, tzinfo=UTC)

STATS = [
    EditorStats(1, "alice", CREATED_2015, None, {1: 4, 5: 2}),
    EditorStats(2, "bob", None, None, {5: 7}),
    EditorStats(3, "carol", datetime(2018, 1, 1, tzinfo=UTC), None, {2: 1, 5: 1}),
]


class CountTests(unittest.TestCase):
    def test_count_editors(self) -> None:
        self.assertEqual(count_editors(STATS, 5), 3)
        self.assertEqual(count_editors(STATS, 1), 1)
        self.assertEqual(count_editors(STATS, 99), 0)

    def test_count_edit_types(self) -> None:
        self.assertEqual(count_edit_types(STATS), {1: 4, 5: 10, 2: 1})

    def test_edit_type_counts_by_editors(self) -> None:
        counts = edit_type_counts(STATS)
        self.assertEqual(counts[0], EditTypeCount(5, 10, 3))
        self.assertEqual({c.edit_type for c in counts[1:]}, {1, 2})
        self.assertTrue(all(c.editors == 1 for c in counts[1:]))

    def test_editors_with_type_keeps_file_order(self) -> None:
        self.assertEqual(editors_with_type(STATS, 5), [(2, "alice"), (7, "bob"), (1, "carol")])
        self.assertEqual(editors_with_type(STATS, 2), [(1, "carol")])

    def test_editor_histogram(self) -> None:
        hist = editor_histogram(STATS, 5, 1, 4, 2)
        self.assertEqual([b.count for b in hist.buckets], [2, 0])
        self.assertEqual(hist.overflow, 1)
        self.assertEqual(hist.total, 3)

    def test_editor_histogram_skips_editors_without_type(self) -> None:
        self.assertEqual(editor_histogram(STATS, 2, 1, 10, 1).total, 1)


class AccountAgeTests(unittest.TestCase):
    def test_single_editor(self) -> None:
        stats = [EditorStats(1, "alice", CREATED_2015, None, {5: 1})]
        expected = (datetime(2020, 1, 1, tzinfo=UTC) - CREATED_2015).total_seconds() / (86400 * 365)
        self.assertEqual(average_account_age(stats, 5, 2019), expected)

    def test_editors_without_creation_time_are_excluded(self) -> None:
        age = average_account_age(STATS, 5, 2019)
        alice = (datetime(2020, 1, 1, tzinfo=UTC) - CREATED_2015).total_seconds() / (86400 * 365)
        carol = (datetime(2020, 1, 1, tzinfo=UTC) - datetime(2018, 1, 1, tzinfo=UTC)).total_seconds() / (86400 * 365)
        self.assertAlmostEqual(age, (alice + carol) / 2)

    def test_no_qualifying_editors(self) -> None:
        self.assertEqual(average_account_age(STATS, 99, 2019), 0.0)
        self.assertEqual(average_account_age([], 5, 2019), 0.0)

    def test_yearly_series(self) -> None:
        summaries = [
            YearSummary(2019, [EditorStats(1, "alice", CREATED_2015, None, {5: 1})]),
            YearSummary(2020, [EditorStats(2, "bob", None, None, {5: 1})]),
        ]
        ages = yearly_average_age(summaries, 5)
        self.assertEqual([year for year, _ in ages], [2019, 2020])
        self.assertAlmostEqual(ages[0][1], 4.589, places=3)
        self.assertEqual(ages[1][1], 0.0)


class YearlySeriesTests(unittest.TestCase):
    summaries = [
        YearSummary(2018, [EditorStats(1, edits={5: 3}), EditorStats(2, edits={6: 1})]),
        YearSummary(2019, []),
        YearSummary(2020, [EditorStats(1, edits={5: 2}), EditorStats(3, edits={5: 4})]),
    ]

    def test_yearly_editors(self) -> None:
        self.assertEqual(yearly_editors(self.summaries, 5), [(2018, 1), (2019, 0), (2020, 2)])

    def test_yearly_edits(self) -> None:
        self.assertEqual(yearly_edits(self.summaries, 5), [(2018, 3), (2019, 0), (2020, 6)])


class CorrelationTests(unittest.TestCase):
    def test_pearson(self) -> None:
        xs = np.array([1.0, 2.0, 3.0, 4.0])
        self.assertAlmostEqual(pearson(xs, xs * 2 + 1), 1.0)
        self.assertAlmostEqual(pearson(xs, -xs), -1.0)
        self.assertAlmostEqual(pearson(xs, np.array([1.0, 3.0, 2.0, 4.0])), 0.8)

    def test_pearson_constant_input(self) -> None:
        self.assertEqual(pearson(np.array([1.0, 2.0]), np.array([3.0, 3.0])), 0.0)

    def test_pearson_rejects_bad_lengths(self) -> None:
        with self.assertRaises(ValueError):
            pearson(np.array([]), np.array([]))
        with self.assertRaises(ValueError):
            pearson(np.array([1.0]), np.array([1.0, 2.0]))

    def test_identical_vectors_are_reported(self) -> None:
        stats = [
            EditorStats(1, edits={1: 3, 2: 3}),
            EditorStats(2, edits={1: 1, 2: 1}),
            EditorStats(3, edits={1: 8, 2: 8}),
        ]
        pairs = edit_type_correlations(stats)
        self.assertEqual(len(pairs), 1)
        et1, et2, coeff = pairs[0]
        self.assertEqual((et1, et2), (2, 1))
        self.assertAlmostEqual(coeff, 1.0)

    def test_missing_types_count_as_zero(self) -> None:
        stats = [
            EditorStats(1, edits={1: 5}),
            EditorStats(2, edits={2: 5}),
            EditorStats(3, edits={1: 6}),
            EditorStats(4, edits={2: 4}),
        ]
        pairs = edit_type_correlations(stats)
        self.assertEqual(len(pairs), 1)
        self.assertLess(pairs[0][2], -0.5)

    def test_weak_and_constant_pairs_are_dropped(self) -> None:
        stats = [
            EditorStats(1, edits={1: 1, 2: 1, 3: 2}),
            EditorStats(2, edits={1: 2, 3: 2}),
            EditorStats(3, edits={1: 3, 2: 1, 3: 2}),
        ]
        self.assertEqual(edit_type_correlations(stats), [])

    def test_pair_order(self) -> None:
        stats = [
            EditorStats(1, edits={1: 1, 2: 1, 3: 1}),
            EditorStats(2, edits={1: 2, 2: 2, 3: 2}),
        ]
        self.assertEqual([(a, b) for a, b, _ in edit_type_correlations(stats)], [(2, 1), (3, 1), (3, 2)])

    def test_no_editors(self) -> None:
        self.assertEqual(edit_type_correlations([]), [])


if __name__ == "__main__":
    unittest.main()
