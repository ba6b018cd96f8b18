from dataclasses import dataclass
from typing import List, TextIO

from . import config


@dataclass
class Bucket:
    lo: int
    hi: int
    count: int = 0


class Histogram:
    """Simple linear histogram over the inclusive range [lo, hi]."""

    def __init__(self, lo: int, hi: int, num_buckets: int) -> None:
        if num_buckets < 1:
            raise ValueError(f"need at least one bucket, got {num_buckets}")
        if hi < lo:
            raise ValueError(f"histogram max {hi} is below min {lo}")
        self.step = (hi - lo + 1) / num_buckets
        self.buckets: List[Bucket] = [
            Bucket(lo + int(i * self.step), lo + int((i + 1) * self.step) - 1) for i in range(num_buckets)
        ]
        self.underflow = 0
        self.overflow = 0

    def add(self, value: int) -> None:
        first, last = self.buckets[0], self.buckets[-1]
        if value < first.lo:
            self.underflow += 1
        elif value > last.hi:
            self.overflow += 1
        else:
            # Bucket bounds are truncated independently, so the direct index can
            # land one bucket low. With 10 buckets over [4, 50] the step is 4.7
            # and buckets[2].lo is int(4 + 9.4) = 13, but (13 - 4) / 4.7 = 1.915.
            # With a step below 1 some buckets are empty and the gap can be wider.
            # Float division can round up to num_buckets once the range nears 2**53.
            i = min(int((value - first.lo) / self.step), len(self.buckets) - 1)
            while value > self.buckets[i].hi:
                i += 1
            while value < self.buckets[i].lo:
                i -= 1
            self.buckets[i].count += 1

    @property
    def total(self) -> int:
        return self.underflow + self.overflow + sum(b.count for b in self.buckets)

    def write(self, out: TextIO, label_width: int = 0, bar_width: int = config.HISTOGRAM_BAR_WIDTH) -> None:
        """Write a text rendering of the histogram to out.

        label_width is a lower bound for the label column. bar_width is the
        length of the bar drawn for the largest count.
        """

        def make_label(lo: int, hi: int) -> str:
            if lo == hi:
                return str(lo)
            return f"{lo}-{hi}"

        # Underflow could technically be wider if it's negative.
        label_width = max(label_width, len(str(self.buckets[-1].hi + 1)) + 1)
        label_width = max([label_width] + [len(make_label(b.lo, b.hi)) for b in self.buckets])
        max_count = max([self.underflow, self.overflow] + [b.count for b in self.buckets])

        def write_line(label: str, count: int) -> None:
            # Round half away from zero.
            width = int(count / max_count * bar_width + 0.5) if max_count else 0
            out.write(f"{label:>{label_width}} |{'#' * width} {count}\n")

        if self.underflow > 0:
            write_line(f"<{self.buckets[0].lo}", self.underflow)
        for b in self.buckets:
            write_line(make_label(b.lo, b.hi), b.count)
        if self.overflow > 0:
            write_line(f">{self.buckets[-1].hi}", self.overflow)
