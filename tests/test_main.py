import logging

from campus.main import main


def test_headless_main_runs(caplog):
    with caplog.at_level(logging.INFO):
        main(["--headless", "--ticks", "3", "--seed", "1", "--mode", "standard"])
    assert "Stopped on day 3" in caplog.text
