import json

from travelquote.config import settings
from travelquote.pipeline import EXIT_FAILED, EXIT_INVALID_BOOKING, EXIT_OK, main_cli


def test_quote_valid_booking(capsys):
    code = main_cli(["quote", "--name", "Asha", "--check-in", "2024-01-06", "--check-out", "2024-01-07",
                     "--package", "1", "--promo", "festive5"])
    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "Nights: 1" in out
    assert f"Total: {settings.currency_symbol}1379" in out
    assert "Valid: yes" in out


def test_quote_invalid_booking(capsys):
    code = main_cli(["quote", "--check-in", "2024-01-08", "--check-out", "2024-01-10", "--package", "1"])
    out = capsys.readouterr().out
    assert code == EXIT_INVALID_BOOKING
    assert f"Total: {settings.currency_symbol}2640" in out
    assert "Valid: no" in out


def test_submit(capsys):
    code = main_cli(["submit", "--name", "Asha", "--check-in", "2024-01-08", "--check-out", "2024-01-10",
                     "--package", "2", "--promo", "EARLYBIRD"])
    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert f"Booking submitted!\nEstimated total: {settings.currency_symbol}9450" in out


def test_submit_refuses_invalid_booking(capsys):
    code = main_cli(["submit", "--name", "Asha", "--check-in", "2024-01-10", "--check-out", "2024-01-10",
                     "--package", "1"])
    out = capsys.readouterr().out
    assert code == EXIT_INVALID_BOOKING
    assert "Booking submitted" not in out


def test_options(capsys):
    assert main_cli(["options"]) == EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"1\tKasauli (4d) - {settings.currency_symbol}1200"
    assert len(out) == 3


def test_packages_page(tmp_path):
    output = tmp_path / "packages.html"
    assert main_cli(["packages", "--output", str(output)]) == EXIT_OK
    html = output.read_text(encoding="utf-8")
    assert "Kasauli" in html
    assert f"{settings.currency_symbol}5250" in html


def test_custom_catalog(tmp_path, capsys):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([
        {"id": 4, "destination": "Leh", "durationDays": 6, "basePrice": 1000, "season": "Winter"},
    ]), encoding="utf-8")
    code = main_cli(["--catalog", str(path), "quote", "--name", "Asha", "--check-in", "2024-01-08",
                     "--check-out", "2024-01-09", "--package", "4"])
    assert code == EXIT_OK
    assert f"Total: {settings.currency_symbol}1050" in capsys.readouterr().out


def test_broken_catalog_fails(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("[{\"id\": 1}]", encoding="utf-8")
    assert main_cli(["--catalog", str(path), "options"]) == EXIT_FAILED
