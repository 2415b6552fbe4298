from pathlib import Path
import textwrap

import pytest
from pydantic import ValidationError

from rnscaffold.config import DEFAULT_APP, AppConfig, ConfigError, load_config


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "app.toml"
    path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_loads_top_level_descriptor(sample_config: Path) -> None:
    app = load_config(sample_config)

    assert app.name == "DemoApp"
    assert app.description == 'Demo "quoted" description'
    assert app.features == ["offline", "push"]


def test_loads_app_table(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
        [app]
        name = "TableApp"
        author = "Someone"
        """,
    )

    app = load_config(path)

    assert app.name == "TableApp"
    assert app.author == "Someone"
    assert app.version == "1.0.0"
    assert app.features == []


def test_rejects_keys_outside_app_table(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
        author = "Stray"

        [app]
        name = "TableApp"
        """,
    )

    with pytest.raises(ConfigError) as exc:
        load_config(path)

    assert "author" in str(exc.value)


def test_rejects_unknown_keys(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
        name = "MyApp"
        unexpected = "nope"
        """,
    )

    with pytest.raises(ConfigError) as exc:
        load_config(path)

    assert "extra" in str(exc.value).lower()


@pytest.mark.parametrize("name", ["", "..", "nested/app", "back\\\\slash"])
def test_rejects_unsafe_names(tmp_path: Path, name: str) -> None:
    path = _write_config(tmp_path, f'name = "{name}"')

    with pytest.raises(ConfigError) as exc:
        load_config(path)

    assert "name" in str(exc.value)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc:
        load_config(tmp_path / "missing.toml")

    assert "not found" in str(exc.value)


def test_invalid_toml(tmp_path: Path) -> None:
    path = _write_config(tmp_path, 'name = "unterminated')

    with pytest.raises(ConfigError) as exc:
        load_config(path)

    assert "Invalid TOML" in str(exc.value)


def test_default_descriptor() -> None:
    assert DEFAULT_APP.metadata() == {
        "name": "MyApp",
        "description": "My app description",
        "author": "John Doe",
        "version": "1.0.0",
        "features": ["feature1", "feature2"],
    }


def test_descriptor_is_immutable() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_APP.name = "Other"  # type: ignore[misc]

    assert AppConfig(name="Plain").description == ""
