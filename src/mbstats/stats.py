"""Statistics computed from loaded editor summaries."""

from datetime import UTC, datetime
from typing import Dict, Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np

from . import config
from .histogram import Histogram
from .summaries import EditorStats, YearSummary


class EditTypeCount(NamedTuple):
    edit_type: int
    total: int
    editors: int


def count_editors(stats: Iterable[EditorStats], edit_type: int) -> int:
    """Return the number of editors with at least one edit of edit_type."""
    return sum(1 for es in stats if es.edits.get(edit_type, 0) > 0)


def count_edit_types(stats: Iterable[EditorStats]) -> Dict[int, int]:
    """Return a map from edit type to total number of edits."""
    counts: Dict[int, int] = {}
    for es in stats:
        for edit_type, cnt in es.edits.items():
            counts[edit_type] = counts.get(edit_type, 0) + cnt
    return counts


def edit_type_counts(stats: Sequence[EditorStats]) -> List[EditTypeCount]:
    """Return per-type totals ordered by descending number of editors."""
    counts = count_edit_types(stats)
    types = [EditTypeCount(et, total, count_editors(stats, et)) for et, total in counts.items()]
    types.sort(key=lambda t: t.editors, reverse=True)
    return types


def editor_histogram(
    stats: Iterable[EditorStats],
    edit_type: int,
    lo: int = config.HISTOGRAM_MIN,
    hi: int = config.HISTOGRAM_MAX,
    num_buckets: int = config.HISTOGRAM_BUCKETS,
) -> Histogram:
    """Return a histogram of per-editor counts for editors with edits of edit_type."""
    hist = Histogram(lo, hi, num_buckets)
    for es in stats:
        cnt = es.edits.get(edit_type, 0)
        if cnt > 0:
            hist.add(cnt)
    return hist


def editors_with_type(stats: Iterable[EditorStats], edit_type: int) -> List[Tuple[int, str]]:
    """Return (count, name) for each editor with edits of edit_type, in file order."""
    return [(es.edits[edit_type], es.name) for es in stats if es.edits.get(edit_type, 0) > 0]


def yearly_editors(summaries: Iterable[YearSummary], edit_type: int) -> List[Tuple[int, int]]:
    return [(ys.year, count_editors(ys.stats, edit_type)) for ys in summaries]


def yearly_edits(summaries: Iterable[YearSummary], edit_type: int) -> List[Tuple[int, int]]:
    return [(ys.year, count_edit_types(ys.stats).get(edit_type, 0)) for ys in summaries]


def average_account_age(stats: Iterable[EditorStats], edit_type: int, year: int) -> float:
    """Return the mean account age in years at the end of year.

    Only editors with edits of edit_type and a known creation time are
    counted. Ages use 365-day years. Returns 0.0 if no editor qualifies.
    """
    end = datetime(year + 1, 1, 1, tzinfo=UTC)
    total = 0.0
    cnt = 0
    for es in stats:
        if es.edits.get(edit_type, 0) > 0 and es.created is not None:
            total += (end - es.created).total_seconds() / config.SECONDS_PER_YEAR
            cnt += 1
    if cnt == 0:
        return 0.0
    return total / cnt


def yearly_average_age(summaries: Iterable[YearSummary], edit_type: int) -> List[Tuple[int, float]]:
    return [(ys.year, average_account_age(ys.stats, edit_type, ys.year)) for ys in summaries]


def pearson(xs: np.ndarray, ys: np.ndarray) -> float:
    """Return the Pearson correlation coefficient, or 0 if either input is constant."""
    if len(xs) == 0 or len(xs) != len(ys):
        raise ValueError(f"need equal non-empty inputs, got {len(xs)} and {len(ys)}")
    sd_x = xs.std()
    sd_y = ys.std()
    if sd_x == 0 or sd_y == 0:
        return 0.0
    cov = ((xs - xs.mean()) * (ys - ys.mean())).mean()
    return float(cov / (sd_x * sd_y))


def edit_type_correlations(
    stats: Sequence[EditorStats], threshold: float = config.CORRELATION_THRESHOLD
) -> List[Tuple[int, int, float]]:
    """Return (type1, type2, coeff) for each pair of edit types with |coeff| > threshold.

    Each type's vector holds one count per editor in stats, with 0 for editors
    without edits of that type.
    """
    if not stats:
        return []
    types = sorted(count_edit_types(stats))
    vectors = {
        et: np.fromiter((es.edits.get(et, 0) for es in stats), dtype=np.float64, count=len(stats)) for et in types
    }
    pairs = []
    for i in range(len(types)):
        for j in range(i):
            et1, et2 = types[i], types[j]
            coeff = pearson(vectors[et1], vectors[et2])
            if coeff > threshold or coeff < -threshold:
                pairs.append((et1, et2, coeff))
    return pairs
