"""Sampling from a discrete probability distribution."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator


class DiscretePDF:
    """A discrete distribution stored as a cumulative table."""

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._sum = 0.0
        self._normalization = 0.0
        self.clear()
        for value in values:
            self.append(value)

    def clear(self) -> None:
        """Remove all entries."""
        self._cdf = [0.0]
        self._normalized = False

    def append(self, pdf_value: float) -> None:
        """Add an entry with the given (unnormalized) probability."""
        self._cdf.append(self._cdf[-1] + pdf_value)

    def __len__(self) -> int:
        return len(self._cdf) - 1

    def __getitem__(self, entry: int) -> float:
        if not 0 <= entry < len(self):
            raise IndexError(f"entry {entry} out of range")
        return self._cdf[entry + 1] - self._cdf[entry]

    def __iter__(self) -> Iterator[float]:
        return (self[i] for i in range(len(self)))

    @property
    def is_normalized(self) -> bool:
        return self._normalized

    @property
    def sum(self) -> float:
        """The unnormalized sum recorded by the last :meth:`normalize`."""
        return self._sum

    @property
    def normalization(self) -> float:
        """The inverse of :attr:`sum`, recorded by the last :meth:`normalize`."""
        return self._normalization

    def normalize(self) -> float:
        """Scale the entries to sum to one and return the previous sum."""
        self._sum = self._cdf[-1]
        if self._sum > 0:
            self._normalization = 1.0 / self._sum
            self._cdf = [c * self._normalization for c in self._cdf]
            self._cdf[-1] = 1.0
            self._normalized = True
        else:
            self._normalization = 0.0
        return self._sum

    def sample(self, sample_value: float) -> int:
        """Map a uniform sample on [0, 1] to an entry index."""
        if not len(self):
            raise ValueError("cannot sample an empty distribution")
        position = bisect_left(self._cdf, sample_value)
        return min(max(0, position - 1), len(self._cdf) - 2)

    def sample_with_pdf(self, sample_value: float) -> tuple[int, float]:
        """Return the sampled index and its probability."""
        index = self.sample(sample_value)
        return index, self[index]

    def _reuse(self, sample_value: float, index: int) -> float:
        low, high = self._cdf[index], self._cdf[index + 1]
        return (sample_value - low) / (high - low)

    def sample_reuse(self, sample_value: float) -> tuple[int, float]:
        """Return the sampled index and the sample rescaled for reuse."""
        index = self.sample(sample_value)
        return index, self._reuse(sample_value, index)

    def sample_reuse_with_pdf(self, sample_value: float) -> tuple[int, float, float]:
        """Return the index, the rescaled sample and the probability."""
        index, pdf = self.sample_with_pdf(sample_value)
        return index, self._reuse(sample_value, index), pdf

    def __str__(self) -> str:
        entries = ", ".join(f"{p:f}" for p in self)
        return (
            f"DiscretePDF[sum={self._sum:f}, normalized={int(self._normalized)}, "
            f"pdf = {{{entries}}}]"
        )