"""Tests for GqlnnoSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from gqlnno.config.settings import GqlnnoSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GQLNNO_CONFIG", "GQLNNO_VERBOSE", "GQLNNO_ENFORCEMENT__ROOT_SEGMENT"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = GqlnnoSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.enforcement.root_segment == "args"
        assert settings.enforcement.error_code == "NON_NULL_OPTIONAL"
        assert settings.directive.name == "nonNullOptional"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = GqlnnoSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "gqlnno.toml").write_text(
            '[enforcement]\nroot_segment = "input"\n[directive]\nname = "noNull"\n'
        )
        settings = GqlnnoSettings.from_cli(start=tmp_path)
        assert settings.config_path == tmp_path / "gqlnno.toml"
        assert settings.enforcement.root_segment == "input"
        assert settings.enforcement.error_code == "NON_NULL_OPTIONAL"  # default preserved
        assert settings.directive.name == "noNull"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[enforcement]\nerror_code = "NNO"\n')
        settings = GqlnnoSettings.from_cli(config_path=str(custom))
        assert settings.enforcement.error_code == "NNO"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "gqlnno.toml").write_text("[enforcement\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            GqlnnoSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "gqlnno.toml").write_text('[enforcement]\nroot_segment = "input"\n')
        monkeypatch.setenv("GQLNNO_ENFORCEMENT__ROOT_SEGMENT", "env")
        settings = GqlnnoSettings.from_cli(start=tmp_path)
        assert settings.enforcement.root_segment == "env"

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "gqlnno.toml").write_text("verbose = true\n")
        settings = GqlnnoSettings.from_cli(start=tmp_path, verbose=False)
        assert settings.verbose is False
