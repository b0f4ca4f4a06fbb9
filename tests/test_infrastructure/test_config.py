"""Tests for configuration."""

from treefs.infrastructure.config import _int_setting, read_env_file


class TestReadEnvFile:
    def test_reads_env_values(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("TREEFS_MAX_CONCURRENCY=8\nTREEFS_LENIENT_MKDIR=true\n")
        monkeypatch.chdir(tmp_path)

        result = read_env_file(["TREEFS_MAX_CONCURRENCY", "TREEFS_LENIENT_MKDIR"])
        assert result == {"TREEFS_MAX_CONCURRENCY": "8", "TREEFS_LENIENT_MKDIR": "true"}

    def test_strips_quotes(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text('KEY1="quoted"\nKEY2=\'single\'\n')
        monkeypatch.chdir(tmp_path)

        result = read_env_file(["KEY1", "KEY2"])
        assert result["KEY1"] == "quoted"
        assert result["KEY2"] == "single"

    def test_skips_comments_and_blank_lines(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\n\nKEY1=value1\n\n")
        monkeypatch.chdir(tmp_path)

        assert read_env_file(["KEY1"]) == {"KEY1": "value1"}

    def test_only_requested_keys(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("KEY1=value1\nKEY2=value2\n")
        monkeypatch.chdir(tmp_path)

        assert "KEY2" not in read_env_file(["KEY1"])

    def test_missing_file_returns_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert read_env_file(["KEY1"]) == {}

    def test_empty_values_skipped(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("KEY1=\n")
        monkeypatch.chdir(tmp_path)
        assert read_env_file(["KEY1"]) == {}


class TestIntSetting:
    def test_parses(self):
        assert _int_setting("16", 32) == 16

    def test_missing_uses_default(self):
        assert _int_setting(None, 32) == 32
        assert _int_setting("", 32) == 32

    def test_garbage_uses_default(self):
        assert _int_setting("lots", 32) == 32
