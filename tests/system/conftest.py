import importlib.util
import os
import uuid
import pytest

#system tests drive a real browser against a running server, e.g.
#  BASE_URL=http://127.0.0.1:5000 pytest tests/system
collect_ignore_glob = []
if not os.getenv("BASE_URL") or importlib.util.find_spec("selenium") is None:
    collect_ignore_glob = ["test_*.py"]


@pytest.fixture(scope="session")
def base_url():
    return os.getenv("BASE_URL").rstrip("/")


@pytest.fixture(scope="session")
def creds():
    suffix = uuid.uuid4().hex[:8]
    return {
        "username": f"selenium_{suffix}",
        "email": f"selenium_{suffix}@example.com",
        "password": "abc12345",
    }


@pytest.fixture(scope="session")
def driver():
    from selenium import webdriver

    options = webdriver.ChromeOptions()
    options.add_argument("--headless=new")
    options.add_argument("--window-size=1400,900")
    drv = webdriver.Chrome(options=options)
    yield drv
    drv.quit()
