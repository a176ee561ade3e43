"""Root test configuration: isolate each test from local config files and env vars"""

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Run every test in an empty directory with no MDTYPST_* env vars set."""
    monkeypatch.chdir(tmp_path)
    for name in ("MDTYPST_APP_NAME", "MDTYPST_PARSER_CONFIG", "MDTYPST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
