from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

SAMPLE_TEMPLATE = textwrap.dedent(
    """
    <pages>
      <page name="home" title="Home Page">
        <component name="header" />
        <component name="footer" />
      </page>
      <page name="about" title="About Page">
        <component name="header" />
        <component name="about-content" />
      </page>
    </pages>
    """
).strip()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def sample_markup() -> str:
    return SAMPLE_TEMPLATE


@pytest.fixture
def sample_template(tmp_path: Path) -> Path:
    """
    Write the two-page home/about template and return its path.
    """
    path = tmp_path / "pages.html"
    path.write_text(SAMPLE_TEMPLATE + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_config(tmp_path: Path) -> Path:
    config_text = textwrap.dedent(
        """
        name = "DemoApp"
        description = "Demo \\"quoted\\" description"
        author = "Jane Roe"
        version = "0.2.0"
        features = ["offline", "push"]
        """
    ).strip()
    path = tmp_path / "app.toml"
    path.write_text(config_text + "\n", encoding="utf-8")
    return path
