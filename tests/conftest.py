import logging

import pytest

DEMO_TEXT = (
    "ItemID,Category,Price,UnitsSold,Location\n"
    "101,Electronics,49.99,150,East\n"
    "102,Books,19.50,300,West\n"
    "103,Electronics,129.00,80,North\n"
    "104,Clothing,35.75,220,East\n"
    "105,Books,15.00,450,South\n"
)


@pytest.fixture()
def demo_csv(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(DEMO_TEXT, encoding="ascii")
    return path


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for key in ("DATA_PATH", "COLUMN_WIDTH", "CURRENCY_SYMBOL", "CREATE_DEMO", "LOG_LEVEL"):
        monkeypatch.delenv(f"TABSTORE_{key}", raising=False)


@pytest.fixture(autouse=True)
def _reset_console_logging():
    yield
    # cli.main binds a handler to the captured stderr of the running test
    logger = logging.getLogger("tabstore")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
