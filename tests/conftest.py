import sys
from pathlib import Path

import pytest

# make the src/ layout importable without an editable install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def observer_yaml(tmp_path: Path) -> Path:
    cfg = tmp_path / "observer.yaml"
    cfg.write_text(
        "observer:\n"
        "  name: nyc\n"
        "  latitude_deg: 40.7128\n"
        "  longitude_deg: -74.006\n"
        "  standard_utc_offset_hours: -5\n"
        "  daylight_utc_offset_hours: -4\n"
    )
    return cfg
