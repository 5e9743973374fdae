import pytest

from homechef.infra import paths


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point every repository at an empty temporary data directory."""
    monkeypatch.setattr(paths, "DATA_DIR", tmp_path)
    return tmp_path
