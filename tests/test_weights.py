import pytest

from itps_bot.tariff import InvalidWeightError, parse_max_weight, parse_weight


@pytest.mark.parametrize(
    "raw, grams",
    [("120", 120), (" 120 ", 120), ("120g", 120), ("120 g", 120), ("120.0", 120), (75, 75)],
)
def test_parse_weight_valid(raw, grams):
    assert parse_weight(raw) == grams


@pytest.mark.parametrize(
    "raw, reason",
    [
        (None, InvalidWeightError.MISSING),
        ("", InvalidWeightError.MISSING),
        ("   ", InvalidWeightError.MISSING),
        ("abc", InvalidWeightError.NOT_A_NUMBER),
        ("12abc", InvalidWeightError.NOT_A_NUMBER),
        ("nan", InvalidWeightError.NOT_A_NUMBER),
        (True, InvalidWeightError.NOT_A_NUMBER),
        ("12.5", InvalidWeightError.NOT_INTEGER),
        ("0", InvalidWeightError.NOT_POSITIVE),
        ("-5", InvalidWeightError.NOT_POSITIVE),
        (0, InvalidWeightError.NOT_POSITIVE),
    ],
)
def test_parse_weight_invalid(raw, reason):
    with pytest.raises(InvalidWeightError) as exc:
        parse_weight(raw)
    assert exc.value.reason == reason
    assert exc.value.value == raw


@pytest.mark.parametrize(
    "label, grams",
    [("2 kg", 2000), ("5 kg", 5000), ("5kg", 5000), ("2 KG", 2000), ("1.5 kg", 1500), ("500 g", 500), ("750", 750), (2000, 2000)],
)
def test_parse_max_weight(label, grams):
    assert parse_max_weight(label) == grams


def test_parse_max_weight_does_not_guess_from_digits():
    # "15 kg" contains a 5 but is neither 5 kg nor 2 kg
    assert parse_max_weight("15 kg") == 15000


@pytest.mark.parametrize("label", ["", "two kg", "2 lb", "0 kg", -1, 0, True, "0.0005 kg"])
def test_parse_max_weight_invalid(label):
    with pytest.raises(ValueError):
        parse_max_weight(label)
