"""
Unit tests for the shipped gunicorn configuration.
"""
import runpy
from pathlib import Path

import pytest

CONFIG_PATH = Path(__file__).resolve().parents[3] / "infrastructure" / "docker" / "fastapi" / "gunicorn.conf.py"


def load_config():
    return runpy.run_path(str(CONFIG_PATH))


class TestGunicornConfig:
    """Test worker settings that in-memory request tracking depends on."""

    @pytest.mark.parametrize("debug", ["False", "True"])
    def test_single_worker(self, monkeypatch, debug):
        monkeypatch.setenv("DEBUG", debug)
        monkeypatch.setenv("WEB_CONCURRENCY", "8")

        config = load_config()

        assert config["workers"] == 1
        assert config["max_requests"] == 0

    def test_serves_virtual_sa_app(self):
        config = load_config()

        assert config["wsgi_app"] == "virtual_sa.main:app"
        assert config["worker_class"] == "uvicorn.workers.UvicornWorker"
