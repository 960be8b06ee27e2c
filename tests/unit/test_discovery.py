"""Tests for meta-config discovery functionality."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from configseek import ConfigResult, Explorer, normalize_options
from configseek.core.exceptions import ConfigurationError
from configseek.discovery import find_meta_config, meta_config_overrides


@pytest.fixture
def cwd(tmp_path: Path) -> Path:
    """The isolated working directory created by conftest."""
    return tmp_path / "cwd"


@pytest.mark.core
@pytest.mark.tra("Domain.Discovery")
class TestFindMetaConfig:
    """Tests for find_meta_config function."""

    def test_returns_none_without_meta_config(self, cwd: Path) -> None:
        """No meta-config file means None."""
        assert find_meta_config(cwd) is None

    def test_finds_config_dir_file(self, cwd: Path) -> None:
        """.config/config.json is found and projected to its configseek section."""
        (cwd / ".config").mkdir()
        path = cwd / ".config" / "config.json"
        path.write_text(json.dumps({"configseek": {"searchPlaces": ["x.json"]}}))

        result = find_meta_config(cwd)

        assert result == ConfigResult(filepath=path, config={"searchPlaces": ["x.json"]})

    def test_file_without_section_still_counts(self, cwd: Path) -> None:
        """A meta-config holding only app config is found, with an empty section."""
        (cwd / ".config").mkdir()
        path = cwd / ".config" / "config.yaml"
        path.write_text("myapp:\n  x: 1\n")

        result = find_meta_config(cwd)

        assert result is not None
        assert result.filepath == path
        assert result.is_empty

    def test_pyproject_tool_table(self, cwd: Path) -> None:
        """[tool.configseek] in pyproject.toml is a meta-config."""
        (cwd / "pyproject.toml").write_text(
            '[tool.configseek]\nsearch_places = [".{name}rc"]\n'
        )

        result = find_meta_config(cwd)

        assert result is not None
        assert result.config == {"search_places": [".{name}rc"]}

    def test_pyproject_without_table_is_ignored(self, cwd: Path) -> None:
        """An ordinary pyproject.toml is not a meta-config."""
        (cwd / "pyproject.toml").write_text('[project]\nname = "demo"\n')

        assert find_meta_config(cwd) is None

    def test_does_not_ascend(self, tmp_path: Path, cwd: Path) -> None:
        """Only the given directory is searched."""
        (tmp_path / ".config").mkdir()
        (tmp_path / ".config" / "config.json").write_text('{"configseek": {}}')

        assert find_meta_config(cwd) is None

    def test_defaults_to_cwd(self, cwd: Path) -> None:
        """Without an argument the current directory is used."""
        (cwd / ".config").mkdir()
        (cwd / ".config" / "config.toml").write_text("[configseek]\n")

        result = find_meta_config()

        assert result is not None
        assert result.filepath == cwd / ".config" / "config.toml"


@pytest.mark.core
@pytest.mark.tra("Domain.Discovery")
class TestMetaConfigOverrides:
    """Tests for meta_config_overrides function."""

    def test_empty_section(self) -> None:
        """An empty meta-config only records its path."""
        meta = ConfigResult(filepath=Path("/p/.config/config.json"))

        assert meta_config_overrides("myapp", meta) == {
            "meta_config_file_path": Path("/p/.config/config.json")
        }

    def test_search_places_name_substitution(self) -> None:
        """{name} in search places becomes the module name."""
        meta = ConfigResult(
            filepath=Path("/p/.config/config.json"),
            config={"search_places": [".{name}rc", "{name}/settings.yaml"]},
        )

        overrides = meta_config_overrides("myapp", meta)

        assert overrides["search_places"] == [".myapprc", "myapp/settings.yaml"]

    def test_camel_case_keys(self) -> None:
        """camelCase keys map to option names."""
        meta = ConfigResult(
            filepath=Path("/p/.config/config.json"),
            config={
                "ignoreEmptySearchPlaces": False,
                "applyPackagePropertyPathToConfiguration": True,
            },
        )

        overrides = meta_config_overrides("myapp", meta)

        assert overrides["ignore_empty_search_places"] is False
        assert overrides["apply_package_property_path_to_configuration"] is True

    def test_loaders_rejected(self) -> None:
        """Meta-config files cannot set loaders."""
        meta = ConfigResult(
            filepath=Path("/p/.config/config.json"), config={"loaders": {}}
        )

        with pytest.raises(ConfigurationError, match="loaders"):
            meta_config_overrides("myapp", meta)

    def test_unknown_key_rejected(self) -> None:
        """Unknown meta-config keys are rejected."""
        meta = ConfigResult(
            filepath=Path("/p/.config/config.json"), config={"stopDir": "/"}
        )

        with pytest.raises(ConfigurationError, match="stopDir"):
            meta_config_overrides("myapp", meta)

    def test_section_must_be_mapping(self) -> None:
        """A non-mapping section is rejected."""
        meta = ConfigResult(filepath=Path("/p/.config/config.json"), config=["x"])

        with pytest.raises(ConfigurationError, match="mapping"):
            meta_config_overrides("myapp", meta)

    def test_search_places_must_be_list(self) -> None:
        """A bare string is not a list of search places."""
        meta = ConfigResult(
            filepath=Path("/p/.config/config.json"),
            config={"search_places": ".myapprc"},
        )

        with pytest.raises(ConfigurationError, match="list"):
            meta_config_overrides("myapp", meta)


@pytest.mark.core
@pytest.mark.tra("Domain.Explorer.MetaConfig")
class TestMetaConfigShortCircuit:
    """Tests for the meta-config preempting the directory walk."""

    def test_meta_config_with_app_section_preempts_walk(
        self, tree: Path, cwd: Path, counting_loader: object
    ) -> None:
        """A meta-config holding app config is returned before any probe."""
        meta_path = cwd / "meta.json"
        meta_path.write_text('{"configseek": {}, "myapp": {"from": "meta"}}')
        (tree / "config.json").write_text('{"from": "tree"}')
        options = normalize_options(
            "myapp",
            stop_dir=tree,
            search_places=["config.json"],
            loaders={".json": counting_loader},
            meta_config_file_path=meta_path,
        )

        result = Explorer(options).search(tree / "b" / "c")

        assert result == ConfigResult(filepath=meta_path, config={"from": "meta"})
        assert counting_loader.calls == [meta_path]  # type: ignore[attr-defined]

    def test_meta_config_without_app_section_falls_through(
        self, tree: Path, cwd: Path
    ) -> None:
        """An empty projection lets the normal walk run."""
        meta_path = cwd / "meta.json"
        meta_path.write_text('{"configseek": {}}')
        (tree / "config.json").write_text('{"from": "tree"}')
        options = normalize_options(
            "myapp",
            stop_dir=tree,
            search_places=["config.json"],
            meta_config_file_path=meta_path,
        )

        result = Explorer(options).search(tree / "b")

        assert result is not None
        assert result.filepath == tree / "config.json"

    def test_missing_meta_config_file_raises(self, tree: Path, cwd: Path) -> None:
        """The meta-config load is a direct load and does not forgive."""
        from configseek import ConfigNotFoundError

        options = normalize_options(
            "myapp",
            stop_dir=tree,
            search_places=["config.json"],
            meta_config_file_path=cwd / "gone.json",
        )

        with pytest.raises(ConfigNotFoundError):
            Explorer(options).search(tree)

    def test_pyproject_meta_config_end_to_end(self, tree: Path, cwd: Path) -> None:
        """[tool.myapp] next to [tool.configseek] preempts the walk."""
        (cwd / "pyproject.toml").write_text(
            "[tool.configseek]\n\n[tool.myapp]\nlevel = 3\n"
        )
        (tree / ".myapprc.json").write_text('{"level": 1}')
        from configseek import create_explorer

        explorer = create_explorer("myapp", stop_dir=tree, cwd=cwd)
        result = explorer.search(tree / "b")

        assert result is not None
        assert result.filepath == cwd / "pyproject.toml"
        assert result.config == {"level": 3}
