import sys
from pathlib import Path

# Ensure src/ is on sys.path for imports like `import pmreport.*`
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest  # noqa: E402

from pmreport.core import config as config_module  # noqa: E402
from pmreport.core.config import AppConfig, ReportConfig, StorageConfig  # noqa: E402
from tests.fixtures.wikipedia_page import PRIME_MINISTERS_HTML  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep every test away from ./data, ./reports and a developer's .env."""
    monkeypatch.chdir(tmp_path)
    for name in ("REPORT_REFERENCE_YEAR", "STORAGE_DATA_DIR", "REPORT_OUTPUT_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    return AppConfig(
        storage=StorageConfig(data_dir=tmp_path / "data"),
        report=ReportConfig(reference_year=2024, output_dir=tmp_path / "reports"),
    )


@pytest.fixture
def cached_page(app_config) -> Path:
    path = app_config.storage.cache_path
    path.write_text(PRIME_MINISTERS_HTML, encoding="utf-8")
    return path
