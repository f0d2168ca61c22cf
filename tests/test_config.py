"""Tests for settings and the per-user .env helpers."""

import pytest
from pydantic import ValidationError

from contentful_cma.core.config import DEFAULT_BASE_URL, CMASettings, write_user_env_vars


class TestCMASettings:
    def test_defaults(self, monkeypatch):
        for name in ("ACCESS_TOKEN", "BASE_URL", "ENVIRONMENT", "DEFAULT_LOCALE", "PAGE_LIMIT"):
            monkeypatch.delenv(f"CONTENTFUL_CMA_{name}", raising=False)

        settings = CMASettings(_env_file=None)

        assert settings.access_token is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.default_locale == "en-US"
        assert settings.page_limit == 100

    def test_reads_prefixed_env_vars(self, monkeypatch):
        monkeypatch.setenv("CONTENTFUL_CMA_ACCESS_TOKEN", "secret")
        monkeypatch.setenv("CONTENTFUL_CMA_ENVIRONMENT", "staging")
        monkeypatch.setenv("CONTENTFUL_CMA_PAGE_LIMIT", "25")

        settings = CMASettings(_env_file=None)

        assert settings.access_token == "secret"
        assert settings.environment == "staging"
        assert settings.page_limit == 25

    def test_page_limit_bounds(self):
        with pytest.raises(ValidationError):
            CMASettings(_env_file=None, page_limit=5000)

    def test_reads_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CONTENTFUL_CMA_ACCESS_TOKEN", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("CONTENTFUL_CMA_ACCESS_TOKEN=from-file\n", encoding="utf-8")

        settings = CMASettings(_env_file=env_file)

        assert settings.access_token == "from-file"


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nCONTENTFUL_CMA_BASE_URL=https://old\nOTHER='kept'\n", encoding="utf-8")

    write_user_env_vars(
        {"CONTENTFUL_CMA_ACCESS_TOKEN": "tok", "CONTENTFUL_CMA_BASE_URL": "https://new", "SKIPPED": None},
        env_path=env_path,
    )

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "CONTENTFUL_CMA_ACCESS_TOKEN=tok" in lines
    assert "CONTENTFUL_CMA_BASE_URL=https://new" in lines
    assert "OTHER=kept" in lines
    assert not any(line.startswith("SKIPPED") for line in lines)
