import logging

import pytest

import run_loan_quote
from constants import MESSAGES


@pytest.fixture(autouse=True)
def reset_cli_logger():
    # The CLI logger binds its console handler to the stream current at first use
    yield
    cli_logger = logging.getLogger(run_loan_quote.__name__)
    for handler in list(cli_logger.handlers):
        cli_logger.removeHandler(handler)
        handler.close()


def test_prints_quote(reference_market_path, capsys):
    assert run_loan_quote.main([reference_market_path, "2000"]) == 0

    assert capsys.readouterr().out == (
        "Requested amount: £2000\n"
        "Rate: 7.2%\n"
        "Monthly repayment: £61.93\n"
        "Total repayment: £2229.74\n"
    )


def test_verbose_run_prints_same_quote(reference_market_path, capsys):
    assert run_loan_quote.main([reference_market_path, "1000", "--verbose"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Requested amount: £1000",
        "Rate: 7.0%",
        "Monthly repayment: £30.88",
        "Total repayment: £1111.70",
    ]


@pytest.mark.parametrize("argv", [[], ["market.csv"]])
def test_missing_arguments(argv, capsys):
    assert run_loan_quote.main(argv) != 0
    assert capsys.readouterr().out == MESSAGES['INVALID_ARGUMENTS'] + "\n"


@pytest.mark.parametrize("amount", ["2400", "1115", "999", "15001", "abc"])
def test_no_quote_for_rejected_amounts(reference_market_path, amount, capsys):
    assert run_loan_quote.main([reference_market_path, amount]) == 0
    assert capsys.readouterr().out == MESSAGES['NO_QUOTE'] + "\n"


def test_no_quote_when_market_file_missing(tmp_path, capsys):
    assert run_loan_quote.main([str(tmp_path / "missing.csv"), "1000"]) == 0
    assert capsys.readouterr().out == MESSAGES['NO_QUOTE'] + "\n"


def test_no_quote_when_market_file_malformed(write_market, capsys):
    path = write_market(["Bob,0.075,not-a-number", "Jane,0.069,5000"])

    assert run_loan_quote.main([path, "1000"]) == 0
    assert capsys.readouterr().out == MESSAGES['NO_QUOTE'] + "\n"


def test_quote_blends_through_expensive_lenders(reference_market_path, capsys):
    run_loan_quote.main([reference_market_path, "2300"])
    out = capsys.readouterr().out

    assert "Rate: 7.5%" in out
    assert "Monthly repayment: £71.54" in out
    assert "Total repayment: £2575.59" in out


def test_extra_arguments_are_ignored(reference_market_path, capsys):
    assert run_loan_quote.main([reference_market_path, "1000", "extra"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[1] == "Rate: 7.0%"


def test_missing_arguments_are_logged(caplog, capsys):
    with caplog.at_level(logging.ERROR):
        assert run_loan_quote.main(["market.csv"]) == 2

    assert any("Configuration error" in record.getMessage() for record in caplog.records)


def test_no_quote_when_market_file_not_utf8(tmp_path, capsys):
    path = tmp_path / "market.csv"
    path.write_bytes(b"Lender,Rate,Available\nB\xffob,0.075,640\n")

    assert run_loan_quote.main([str(path), "1000"]) == 0
    assert capsys.readouterr().out == MESSAGES['NO_QUOTE'] + "\n"


def test_signed_amount_is_quoted(reference_market_path, capsys):
    assert run_loan_quote.main([reference_market_path, "+1000"]) == 0

    assert capsys.readouterr().out.splitlines()[0] == "Requested amount: £1000"


def test_log_file_written_under_working_directory(reference_market_path, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert run_loan_quote.main([reference_market_path, "2000", "--verbose", "--log-file", "quote.log"]) == 0

    log_path = tmp_path / "logs" / "quote.log"
    assert log_path.exists()
    assert "Quoted Quote(requested_amount=Decimal('2000')" in log_path.read_text(encoding="utf-8")
    assert "Rate: 7.2%" in capsys.readouterr().out
