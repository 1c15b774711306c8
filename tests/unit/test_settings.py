"""Unit tests for Settings."""

from config.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("DEXSCREENER_BASE_URL", "REQUEST_TIMEOUT_SECONDS", "SCAN_CONCURRENCY", "LOG_LEVEL", "LOG_DIR"):
            monkeypatch.delenv(key, raising=False)
        s = Settings()
        assert s.dexscreener_base_url == "https://api.dexscreener.com"
        assert s.request_timeout_seconds is None
        assert s.scan_concurrency == 1
        assert s.log_level == "INFO"
        assert s.log_dir is None
        assert s.validate() == []

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DEXSCREENER_BASE_URL", "http://localhost:9000")
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("SCAN_CONCURRENCY", "4")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_DIR", "logs")
        s = Settings()
        assert s.dexscreener_base_url == "http://localhost:9000"
        assert s.request_timeout_seconds == 12.5
        assert s.scan_concurrency == 4
        assert s.log_level == "DEBUG"
        assert s.log_dir == "logs"

    def test_validate_reports_problems(self):
        s = Settings(
            dexscreener_base_url="ftp://example.com",
            request_timeout_seconds=0,
            scan_concurrency=0,
        )
        problems = s.validate()
        assert len(problems) == 3
        assert any("SCAN_CONCURRENCY" in p for p in problems)

    def test_non_positive_timeout_falls_back_to_none(self):
        assert Settings(request_timeout_seconds=-5).effective_request_timeout is None
        assert Settings(request_timeout_seconds=0).effective_request_timeout is None
        assert Settings(request_timeout_seconds=None).effective_request_timeout is None
        assert Settings(request_timeout_seconds=7.5).effective_request_timeout == 7.5
