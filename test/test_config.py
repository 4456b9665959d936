"""
Configuration tests
"""


class TestSettings:
    def test_defaults(self, monkeypatch):
        from adminkit.config import Settings

        monkeypatch.delenv("ADMINKIT_PAGE_SLUG", raising=False)
        config = Settings(_env_file=None)
        assert config.page_slug == "orbitools"
        assert config.option_name == "settings"
        assert config.log_level == "INFO"

    def test_env_prefix(self, monkeypatch):
        from adminkit.config import Settings

        monkeypatch.setenv("ADMINKIT_SETTINGS_FILE", "/tmp/other.json")
        monkeypatch.setenv("ADMINKIT_DEBUG", "true")
        config = Settings(_env_file=None)
        assert config.settings_file == "/tmp/other.json"
        assert config.debug is True

    def test_app_uses_configured_slug(self):
        from adminkit.config import Settings
        from adminkit.main import create_app
        from adminkit.settings.store import InMemorySettingsStore

        app = create_app(Settings(_env_file=None, page_slug="site"), InMemorySettingsStore())
        assert list(app.state.adminkit_pages) == ["site"]
