from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gqlcompose import ComposerSettings, FragmentRegistry  # noqa: E402
from tests.helpers.fixtures import TEMPLATES  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("GQLCOMPOSE_MAX_INLINE_PASSES", "GQLCOMPOSE_SEPARATOR", "GQLCOMPOSE_ROOT_NAME"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def registry() -> FragmentRegistry:
    reg = FragmentRegistry(settings=ComposerSettings())
    reg.register_many(TEMPLATES)
    return reg
