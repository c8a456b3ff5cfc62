# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import os
import tempfile
from pathlib import Path

import pytest

# precisa estar definido antes de `app.core.config` ser importado
os.environ["DOCS_DIR"] = tempfile.mkdtemp(prefix="manual-docs-")
os.environ["APP_ENV"] = "test"

from fastapi.testclient import TestClient  # noqa: E402
from app.main import start_server  # noqa: E402


@pytest.fixture(scope="session")
def client():
    return TestClient(start_server)


@pytest.fixture
def docs_dir():
    """Diretório dos PDFs; limpo após cada teste."""
    path = Path(os.environ["DOCS_DIR"])
    yield path
    for f in path.iterdir():
        f.unlink()
