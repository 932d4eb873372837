import math
import random

import pytest

from algokit.binpacking import Comparison, best_fit, compare, main, worst_fit


@pytest.mark.parametrize(
    "weights, expected",
    [
        ([300, 400], 1),
        ([300, 400, 300], 1),
        ([300, 400, 300, 400], 2),
        ([300, 400, 300, 400, 300], 2),
        ([300, 400, 300, 400, 300, 400], 3),
        ([501, 501, 501, 501, 249, 249, 249, 249, 250, 250, 250, 250], 5),
        ([501, 501, 501, 501, 249, 250, 249, 250, 249, 250, 249, 250], 4),
    ],
)
def test_best_fit_source_cases(weights, expected):
    assert best_fit(weights) == expected


@pytest.mark.parametrize(
    "weights, expected",
    [
        ([300, 400], 1),
        ([300, 400, 300], 1),
        ([300, 400, 300, 400], 2),
        ([300, 400, 300, 400, 300], 2),
        ([300, 400, 300, 400, 300, 400], 3),
        ([501, 501, 501, 501, 249, 249, 249, 249, 250, 250, 250, 250], 4),
        ([501, 501, 501, 501, 249, 250, 249, 250, 249, 250, 249, 250], 5),
    ],
)
def test_worst_fit_source_cases(weights, expected):
    assert worst_fit(weights) == expected


@pytest.mark.parametrize("packer", [best_fit, worst_fit])
@pytest.mark.parametrize("bad", [-1, 1001])
def test_invalid_weight_raises(packer, bad):
    with pytest.raises(ValueError):
        packer([300, bad])


@pytest.mark.parametrize("packer", [best_fit, worst_fit])
def test_empty_needs_no_bins(packer):
    assert packer([]) == 0


@pytest.mark.parametrize("packer", [best_fit, worst_fit])
def test_bin_count_bounds(packer):
    rng = random.Random(7)
    for _ in range(50):
        weights = [rng.randint(1, 1000) for _ in range(30)]
        bins = packer(weights)
        assert math.ceil(sum(weights) / 1000) <= bins <= len(weights)


def test_compare_counts_every_trial():
    result = compare(40, 20, random.Random(5))
    assert result.trials == 40
    assert result.best_fit_wins + result.worst_fit_wins + result.even == 40


def test_compare_is_deterministic_for_a_seed():
    first = compare(30, 15, random.Random(11))
    second = compare(30, 15, random.Random(11))
    assert first.best_fit_wins + first.worst_fit_wins + first.even == 30
    assert (first.best_fit_wins, first.worst_fit_wins, first.even) == (
        second.best_fit_wins,
        second.worst_fit_wins,
        second.even,
    )


def test_comparison_str_format():
    text = str(Comparison(3, 1, 2))
    assert text == "best_fit_wins: 3 worst_fit_wins: 1 even: 2"


def test_main_prints_tally(capsys):
    assert main(["--trials", "6", "--items", "10", "--seed", "2"]) == 0
    words = capsys.readouterr().out.split()
    assert words[0] == "best_fit_wins:"
    assert words[2] == "worst_fit_wins:"
    assert words[4] == "even:"
    assert int(words[1]) + int(words[3]) + int(words[5]) == 6