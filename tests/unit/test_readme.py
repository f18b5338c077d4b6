"""Тесты для README: предупреждение о нестабильном API и ссылка на реализацию"""

from pathlib import Path

import pytest

README = Path(__file__).parent.parent.parent / "README.md"


@pytest.fixture
def readme_text() -> str:
    return README.read_text(encoding="utf-8")


def test_warning_banner_present(readme_text: str) -> None:
    assert "> **Warning**" in readme_text
    assert "The API is not stable yet" in readme_text


def test_points_to_ibex_implementation(readme_text: str) -> None:
    assert '"Ibex Finance" implementation' in readme_text
