import pytest

from itps_bot import cli
from itps_bot.services.tariffs import ENV_DATA, reset_cache

RATES = (
    "tariffs:\n"
    "  - {country: United Kingdom, max_weight: 2 kg, first_50g: 250, additional_50g: 50}\n"
    "  - {country: Japan, max_weight: 5 kg, first_50g: 350, additional_50g: 48}\n"
)


@pytest.fixture(autouse=True)
def rates(monkeypatch):
    monkeypatch.setenv(ENV_DATA, RATES)
    reset_cache()


def test_cli_prints_breakdown(capsys):
    assert cli.main(["United Kingdom", "120"]) == 0
    out = capsys.readouterr().out
    assert "Rs.250.00" in out
    assert "Rs.100.00" in out
    assert "Rs.63.00" in out
    assert "Rs.413.00" in out


def test_cli_custom_tax_rate(capsys):
    assert cli.main(["United Kingdom", "120", "--tax-rate", "0"]) == 0
    out = capsys.readouterr().out
    assert "GST @ 0%" in out
    assert "Rs.350.00" in out


def test_cli_list(capsys):
    assert cli.main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "Japan" in out and "United Kingdom" in out


@pytest.mark.parametrize(
    "argv, message",
    [
        (["Atlantis", "120"], "No ITPS tariff"),
        (["United Kingdom", "0"], "Invalid weight"),
        (["United Kingdom", "abc"], "Invalid weight"),
        (["United Kingdom"], "Invalid weight"),
        (["United Kingdom", "2001"], "exceeds maximum"),
        (["United Kingdom", "120", "--tax-rate", "x"], "Not a decimal"),
        (["United Kingdom", "120", "--tax-rate", "18"], "within 0..1"),
        (["United Kingdom", "120", "--tax-rate", "-0.1"], "within 0..1"),
        ([], "country and weight are required"),
    ],
)
def test_cli_errors(capsys, argv, message):
    assert cli.main(argv) == 2
    err = capsys.readouterr().err
    assert message in err


def test_cli_writes_pdf(tmp_path, capsys):
    target = tmp_path / "receipt.pdf"
    assert cli.main(["Japan", "480", "--pdf", str(target)]) == 0
    assert target.exists() and target.stat().st_size > 0
    assert str(target) in capsys.readouterr().out


def test_cli_default_pdf_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert cli.main(["United Kingdom", "60", "--pdf"]) == 0
    assert (tmp_path / "ITPS_Receipt_United_Kingdom_60g.pdf").exists()


def test_cli_missing_data_file(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv(ENV_DATA)
    assert cli.main(["United Kingdom", "120", "--data", str(tmp_path / "nope.yaml")]) == 2
    assert "nope.yaml" in capsys.readouterr().err


def test_cli_invalid_data_file(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv(ENV_DATA)
    bad = tmp_path / "bad.yaml"
    bad.write_text("tariffs:\n  - {country: '', max_weight: 2 kg, first_50g: 1, additional_50g: 1}\n")
    assert cli.main(["--list", "--data", str(bad)]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_unparsable_data_file(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv(ENV_DATA)
    bad = tmp_path / "broken.yaml"
    bad.write_text("tariffs: [unclosed\n")
    assert cli.main(["United Kingdom", "120", "--data", str(bad)]) == 2
    assert "error:" in capsys.readouterr().err
