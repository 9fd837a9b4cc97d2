import importlib.util
from pathlib import Path

import pytest
from sqlalchemy import func, select

from rentaldb.cli import main as cli_main
from rentaldb.database import create_db_engine, get_db_context
from rentaldb.models import Booking

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "flow_book_and_review.py"


def load_flow_script():
    spec = importlib.util.spec_from_file_location("flow_book_and_review", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def count_bookings(url):
    engine = create_db_engine(url, echo=False)
    try:
        with get_db_context(engine) as db:
            return db.scalar(select(func.count()).select_from(Booking))
    finally:
        engine.dispose()


@pytest.fixture
def seeded_url(sqlite_url, capsys):
    assert cli_main(["--database-url", sqlite_url, "--log-level", "WARNING", "reset"]) == 0
    capsys.readouterr()
    return sqlite_url


def flow_args(url, *extra):
    return [
        "--database-url", url,
        "--check-in", "2030-03-01",
        "--check-out", "2030-03-05",
        *extra,
    ]


def test_dry_run_completes_and_rolls_back(seeded_url, capsys):
    load_flow_script().main(flow_args(seeded_url, "--dry-run"))
    out = capsys.readouterr().out

    assert "STEP 5: Summarize booking" in out
    assert "Dry run: changes rolled back" in out
    assert "FULL FLOW COMPLETE" in out
    assert count_bookings(seeded_url) == 25


def test_invalid_rating_prints_error(seeded_url, capsys):
    with pytest.raises(SystemExit) as exc_info:
        load_flow_script().main(flow_args(seeded_url, "--rating", "9"))
    out = capsys.readouterr().out

    assert exc_info.value.code == 1
    assert "ERROR: Invalid rating:" in out
    assert "FULL FLOW COMPLETE" not in out
    assert count_bookings(seeded_url) == 25


def test_zero_amount_prints_error(seeded_url, capsys):
    with pytest.raises(SystemExit) as exc_info:
        load_flow_script().main(flow_args(seeded_url, "--amount", "0"))
    out = capsys.readouterr().out

    assert exc_info.value.code == 1
    assert "ERROR: Invalid amount:" in out
    assert "STEP 3" not in out
