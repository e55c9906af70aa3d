from pathlib import Path

import pytest

from tests.infrastructure.file_utils import create_project


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Минимальный проект: package.json, version.json, src/, src/css/."""
    return create_project(tmp_path)
