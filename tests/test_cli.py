import json

from rentaldb.cli import main


def run(capsys, sqlite_url, *args):
    code = main(["--database-url", sqlite_url, "--log-level", "WARNING", *args])
    return code, capsys.readouterr().out


def test_reset_then_check(capsys, sqlite_url):
    code, out = run(capsys, sqlite_url, "reset")
    assert code == 0
    assert "Seed complete" in out
    assert "Guest" in out

    code, out = run(capsys, sqlite_url, "check", "--json")
    report = json.loads(out)
    assert code == 0
    assert report["status"] == "OK"
    assert report["counts"]["ReferralReward"] == 25


def test_seed_without_tables_prints_hint(capsys, sqlite_url):
    code, out = run(capsys, sqlite_url, "seed")

    assert code == 1
    assert "Missing tables" in out
    assert "create-tables" in out


def test_seed_twice_fails(capsys, sqlite_url):
    assert run(capsys, sqlite_url, "create-tables")[0] == 0
    assert run(capsys, sqlite_url, "seed")[0] == 0

    code, out = run(capsys, sqlite_url, "seed")
    assert code == 1
    assert "already contain rows" in out


def test_status_lists_tables(capsys, sqlite_url):
    code, out = run(capsys, sqlite_url, "status")
    assert code == 0
    assert "Present (0)" in out

    run(capsys, sqlite_url, "create-tables")
    code, out = run(capsys, sqlite_url, "status")
    assert "Present (20)" in out
    assert "Missing (0)" in out

    run(capsys, sqlite_url, "drop-tables")
    code, out = run(capsys, sqlite_url, "status")
    assert "Missing (20)" in out


def test_check_without_tables_fails(capsys, sqlite_url):
    code, out = run(capsys, sqlite_url, "check")
    assert code == 1
    assert "Missing tables" in out


def test_export_sql(capsys, sqlite_url, tmp_path):
    out_dir = tmp_path / "sql"
    out_dir.mkdir()

    code, out = run(capsys, sqlite_url, "export-sql", "--output-dir", str(out_dir), "--dialect", "mysql")
    assert code == 0
    assert (out_dir / "schema.sql").exists()
    assert (out_dir / "data.sql").exists()


def test_export_sql_missing_directory(capsys, sqlite_url, tmp_path):
    code, out = run(capsys, sqlite_url, "export-sql", "--output-dir", str(tmp_path / "nope"))
    assert code == 1
    assert "verify the output directory" in out
