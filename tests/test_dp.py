import pytest

from algodrills.dp import frog1, frog1_memo, frog2, knapsack, vacation

HEIGHT_SETS = [
    [10, 30, 40, 20],
    [10, 10],
    [30, 10, 60, 10, 60, 50],
    [5],
    [1, 100, 1, 100, 1, 100, 1],
    [7, 3, 9, 2, 8, 4, 6, 1],
]


def test_frog1_worked_example():
    assert frog1([10, 30, 40, 20]) == 30


@pytest.mark.parametrize("heights", HEIGHT_SETS)
def test_frog1_memo_matches_bottom_up(heights):
    assert frog1_memo(heights) == frog1(heights)


@pytest.mark.parametrize("heights", HEIGHT_SETS)
def test_frog2_with_two_matches_frog1(heights):
    assert frog2(heights, 2) == frog1(heights)


def test_frog1_single_stone_costs_nothing():
    assert frog1([42]) == 0
    assert frog1_memo([42]) == 0


def test_frog1_memo_handles_long_input():
    heights = [i % 7 for i in range(5000)]
    assert frog1_memo(heights) == frog1(heights)


@pytest.mark.parametrize("heights", [h for h in HEIGHT_SETS if len(h) > 1])
def test_frog2_long_jump_goes_straight(heights):
    assert frog2(heights, len(heights)) == abs(heights[-1] - heights[0])


@pytest.mark.parametrize("heights", HEIGHT_SETS)
def test_frog2_longer_jumps_never_cost_more(heights):
    costs = [frog2(heights, k) for k in range(1, 6)]
    assert costs == sorted(costs, reverse=True)


def test_frog2_with_one_is_total_variation():
    heights = [3, 8, 1, 4]
    assert frog2(heights, 1) == sum(abs(b - a) for a, b in zip(heights, heights[1:]))


def test_frog2_rejects_zero_jump():
    with pytest.raises(ValueError):
        frog2([1, 2, 3], 0)


@pytest.mark.parametrize("func", [frog1, frog1_memo])
def test_empty_heights_rejected(func):
    with pytest.raises(ValueError):
        func([])


def test_knapsack_worked_example():
    assert knapsack(8, [(3, 30), (4, 50), (5, 60)]) == 90


def test_knapsack_everything_fits():
    items = [(1, 4), (2, 9), (3, 11)]
    assert knapsack(100, items) == sum(v for _, v in items)


def test_knapsack_zero_capacity():
    assert knapsack(0, [(1, 10), (2, 20)]) == 0


def test_knapsack_single_item_too_heavy():
    assert knapsack(4, [(5, 100)]) == 0


def test_knapsack_grows_with_capacity():
    items = [(3, 30), (4, 50), (5, 60), (2, 15)]
    values = [knapsack(c, items) for c in range(15)]
    assert values == sorted(values)


def test_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        knapsack(-1, [(1, 1)])


def test_vacation_worked_example():
    assert vacation([(10, 40, 70), (20, 50, 80), (30, 60, 90)]) == 210


def test_vacation_single_day_picks_best():
    assert vacation([(6, 7, 8)]) == 8


def test_vacation_bounded_by_daily_best():
    days = [(6, 7, 8), (8, 8, 3), (2, 5, 2), (7, 8, 6), (4, 6, 8), (2, 3, 4), (7, 5, 1)]
    assert vacation(days) <= sum(max(d) for d in days)
    assert vacation(days) >= vacation(days[:-1])


def test_vacation_rejects_empty():
    with pytest.raises(ValueError):
        vacation([])