from unittest.mock import MagicMock

import pytest

from services.shared.domain.value_object.user_id import UserId


@pytest.fixture
def user_id():
    """全テスト共通の UserId フィクスチャ"""
    return UserId(value="user-123")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
