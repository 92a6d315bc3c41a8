from unittest.mock import MagicMock

import pytest

from services.shared.domain import IsoDateTime


@pytest.fixture
def now():
    """全テスト共通の基準時刻"""
    return IsoDateTime.from_string("2025-06-15T12:00:00")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
