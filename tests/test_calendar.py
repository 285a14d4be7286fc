import pytest

from fieldtask.service.calendar import generate_days, month_of_day


@pytest.mark.parametrize(
    "year, month, expected_length",
    [
        (2024, 12, 31),
        (2024, 2, 29),
        (2023, 2, 28),
        (2024, 4, 30),
        (1900, 2, 28),
        (2000, 2, 29),
    ],
)
def test_generate_days_length_matches_month(year, month, expected_length):
    assert len(generate_days(year, month)) == expected_length


def test_generate_days_covers_month_first_to_last():
    days = generate_days(2024, 12)

    assert days[0] == "2024-12-01"
    assert days[-1] == "2024-12-31"
    assert "2024-12-11" in days


@pytest.mark.parametrize("month", range(1, 13))
def test_generate_days_strictly_increasing_without_duplicates(month):
    days = generate_days(2024, month)

    assert days == sorted(days)
    assert len(set(days)) == len(days)
    assert all(earlier < later for earlier, later in zip(days, days[1:]))


@pytest.mark.parametrize(
    "year, month",
    [
        (2024, 0),
        (2024, 13),
        (2024, -1),
        (0, 1),
        (10000, 1),
        ("2024", 1),
        (2024, None),
        (2024, 2.5),
    ],
)
def test_generate_days_unresolvable_month_is_empty(year, month):
    assert generate_days(year, month) == []


def test_month_of_day():
    assert month_of_day("2024-12-11") == (2024, 12)
    assert month_of_day("2024-02-30") is None
    assert month_of_day("not a day") is None


@pytest.mark.parametrize(
    "year, expected_first_day",
    [
        (999, "0999-01-01"),
        (1, "0001-01-01"),
    ],
)
def test_generate_days_pads_years_below_1000(year, expected_first_day):
    days = generate_days(year, 1)

    assert days[0] == expected_first_day
    assert days[-1] == expected_first_day.replace("-01-01", "-01-31")
    assert month_of_day(days[0]) == (year, 1)


def test_generate_days_order_holds_across_millennium():
    assert generate_days(999, 12)[-1] < generate_days(1000, 1)[0]
