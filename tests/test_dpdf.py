import pytest

from nori.dpdf import DiscretePDF


def make_pdf(values=(1.0, 1.0, 2.0)):
    pdf = DiscretePDF(values)
    pdf.normalize()
    return pdf


def test_entries_before_normalization():
    pdf = DiscretePDF()
    pdf.append(1.0)
    pdf.append(3.0)
    assert len(pdf) == 2
    assert pdf[0] == 1.0
    assert pdf[1] == 3.0
    assert not pdf.is_normalized


def test_normalize_returns_sum_and_scales():
    pdf = DiscretePDF([1.0, 3.0])
    assert pdf.normalize() == 4.0
    assert pdf.is_normalized
    assert sum(pdf) == pytest.approx(1.0)
    assert pdf.normalization == pytest.approx(1.0 / pdf.sum)


def test_normalize_preserves_ratios():
    pdf = DiscretePDF([2.0, 6.0])
    pdf.normalize()
    assert pdf[1] / pdf[0] == pytest.approx(6.0 / 2.0)


def test_zero_sum_is_not_normalized():
    pdf = DiscretePDF([0.0, 0.0])
    assert pdf.normalize() == 0.0
    assert pdf.normalization == 0.0
    assert not pdf.is_normalized


def test_clear_empties():
    pdf = make_pdf()
    pdf.clear()
    assert len(pdf) == 0
    assert not pdf.is_normalized


def test_index_out_of_range():
    with pytest.raises(IndexError):
        make_pdf()[3]


def test_empty_sampling_raises():
    with pytest.raises(ValueError):
        DiscretePDF().sample(0.5)


def test_sample_end_points():
    pdf = make_pdf()
    assert pdf.sample(0.0) == 0
    assert pdf.sample(1.0) == len(pdf) - 1


def test_sample_is_monotonic_and_in_range():
    pdf = make_pdf()
    indices = [pdf.sample(k / 100.0) for k in range(101)]
    assert indices == sorted(indices)
    assert set(indices) == set(range(len(pdf)))


def test_sample_frequency_matches_probability():
    pdf = make_pdf()
    n = 10000
    counts = [0] * len(pdf)
    for k in range(n):
        counts[pdf.sample((k + 0.5) / n)] += 1
    for index, count in enumerate(counts):
        assert count / n == pytest.approx(pdf[index], abs=1e-3)


def test_sample_with_pdf_reports_entry_probability():
    pdf = make_pdf()
    for value in (0.1, 0.4, 0.9):
        index, prob = pdf.sample_with_pdf(value)
        assert index == pdf.sample(value)
        assert prob == pdf[index]


def test_sample_reuse_stays_in_unit_interval():
    pdf = make_pdf()
    for k in range(1, 100):
        value = k / 100.0
        index, reused = pdf.sample_reuse(value)
        assert index == pdf.sample(value)
        assert 0.0 <= reused <= 1.0


def test_sample_reuse_with_pdf_agrees():
    pdf = make_pdf()
    for value in (0.2, 0.6, 0.95):
        index, reused, prob = pdf.sample_reuse_with_pdf(value)
        assert (index, reused) == pdf.sample_reuse(value)
        assert prob == pdf[index]


def test_string_form():
    pdf = DiscretePDF([1.0, 3.0])
    pdf.normalize()
    assert str(pdf) == "DiscretePDF[sum=4.000000, normalized=1, pdf = {0.250000, 0.750000}]"