"""Tests for smart_cutoff.config."""

from pathlib import Path

import pytest

from smart_cutoff.config import ConfigError, load_settings


class TestLoadSettings:
    """Tests for loading settings from the environment and overrides."""

    def test_from_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        """Values are read from their environment variables."""
        clean_env.setenv("BEET_COMMAND", "/usr/bin/beet")
        clean_env.setenv("TIMELESS_ARGS", "genre:Jazz")
        clean_env.setenv("OUTPUT_FILE", "out.json")
        clean_env.setenv("OUTPUT_KEY", "jazz")

        settings = load_settings()

        assert settings.beet_command == Path("/usr/bin/beet")
        assert settings.timeless_args == "genre:Jazz"
        assert settings.max_entries == 400
        assert settings.output == (Path("out.json"), "jazz")

    def test_overrides_win(self, clean_env: pytest.MonkeyPatch) -> None:
        """Non-None overrides replace environment values."""
        clean_env.setenv("BEET_COMMAND", "/usr/bin/beet")
        clean_env.setenv("TIMELESS_ARGS", "genre:Jazz")

        settings = load_settings(
            beet_command=Path("./beet"), timeless_args=None, max_entries=50
        )

        assert settings.beet_command == Path("./beet")
        assert settings.timeless_args == "genre:Jazz"
        assert settings.max_entries == 50
        assert settings.output is None

    def test_dotenv_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """A `.env` file in the working directory is read."""
        (tmp_path / ".env").write_text(
            "BEET_COMMAND=/opt/beet\nTIMELESS_ARGS=genre:Blues\nMAX_ENTRIES=12\n",
            encoding="utf-8",
        )

        settings = load_settings()

        assert settings.beet_command == Path("/opt/beet")
        assert settings.max_entries == 12

    def test_missing_required(self, clean_env: pytest.MonkeyPatch) -> None:
        """A missing beet command is a configuration error."""
        with pytest.raises(ConfigError, match="BEET_COMMAND"):
            load_settings(timeless_args="a")

    def test_negative_max_entries(self, clean_env: pytest.MonkeyPatch) -> None:
        """max_entries cannot be negative."""
        with pytest.raises(ConfigError):
            load_settings(beet_command=Path("beet"), timeless_args="a", max_entries=-1)

    def test_output_file_without_key(self, clean_env: pytest.MonkeyPatch) -> None:
        """An output file needs an output key."""
        with pytest.raises(ConfigError, match="missing output_key"):
            load_settings(
                beet_command=Path("beet"), timeless_args="a", output_file=Path("o.json")
            )

    def test_output_key_without_file(self, clean_env: pytest.MonkeyPatch) -> None:
        """An output key needs an output file."""
        with pytest.raises(ConfigError, match="missing output_file"):
            load_settings(beet_command=Path("beet"), timeless_args="a", output_key="k")
