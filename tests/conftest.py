from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


SETTINGS_YAML = """\
app: {name: Password Strength Meter, version: '0.0.1'}
logging: {level: WARNING}
field: {min_length: 8, required: true, trim_trailing_space: true}
"""


@pytest.fixture()
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "config"
    directory.mkdir()
    (directory / "settings.yaml").write_text(SETTINGS_YAML, encoding="utf-8")
    monkeypatch.setenv("PSM_CONFIG_PATH", str(directory))
    return directory
