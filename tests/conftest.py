import pytest
from fastapi.testclient import TestClient

import config
from db import get_db, init_db

CSV_HEADER = "timestamp,product_name,expiry_date,quantity,unit_price,channel,payment_method"


@pytest.fixture()
def db_file(tmp_path, monkeypatch):
    path = str(tmp_path / "test.duckdb")
    monkeypatch.setattr(config, "DB_FILE", path)
    monkeypatch.setattr(config, "LOG_FILE", str(tmp_path / "rules_engine.log"))
    init_db()
    return path


@pytest.fixture()
def db_conn(db_file):
    conn = get_db()
    yield conn
    conn.close()


@pytest.fixture()
def client(db_file):
    from main import create_app

    with TestClient(create_app()) as c:
        yield c


@pytest.fixture()
def make_csv():
    def _make(*rows):
        return "\n".join([CSV_HEADER, *rows]) + "\n"
    return _make
