import pytest
from sqlalchemy.engine import make_url

from rentaldb.cli import main
from rentaldb.config import Settings, settings


def make_settings(**kwargs):
    defaults = {
        "mysql_host": "localhost",
        "mysql_port": 3306,
        "mysql_user": "root",
        "mysql_password": "",
        "mysql_db": "airbnbSystem",
        "sqlalchemy_url": None,
    }
    return Settings(_env_file=None, **{**defaults, **kwargs})


def test_default_database_url():
    config = make_settings()

    url = make_url(config.database_url)
    assert url.drivername == "mysql+pymysql"
    assert url.username == "root"
    assert url.password is None
    assert url.database == "airbnbSystem"
    assert make_url(config.server_url).database is None


def test_special_characters_in_credentials_are_escaped():
    config = make_settings(mysql_user="rental@admin", mysql_password="p@ss/w:rd#1")

    for value in (config.database_url, config.server_url):
        url = make_url(value)
        assert url.username == "rental@admin"
        assert url.password == "p@ss/w:rd#1"
        assert url.host == "localhost"
        assert url.port == 3306
    assert make_url(config.database_url).database == "airbnbSystem"


def test_sqlalchemy_url_takes_precedence():
    config = make_settings(sqlalchemy_url="sqlite:///rental.db", mysql_password="secret")

    assert config.database_url == "sqlite:///rental.db"


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == f"{settings.app_name} {settings.app_version}"
