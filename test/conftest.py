import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
from dotenv import load_dotenv

load_dotenv()

"""
Ensure project imports work in tests without installing the package.
Adds <root>/src to sys.path.
"""

THIS_DIR = Path(__file__).resolve().parent
REPO_ROOT = THIS_DIR.parent
SRC_DIR = REPO_ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


# 测试标记配置
def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line("markers", "unit: 标记为单元测试")
    config.addinivalue_line("markers", "network: 标记为需要网络连接的测试")


@pytest.fixture
def mock_transport():
    """默认返回空JSON对象的传输层"""
    transport = Mock()
    transport.send.return_value = '{"result": true}'
    return transport


@pytest.fixture
def api_client(mock_transport):
    """带测试凭据的OKCoin客户端"""
    from okcoin import OKCoinAPI

    client = OKCoinAPI("test_key", "test_secret", transport=mock_transport)
    yield client
    client.close()


@pytest.fixture
def api_client_no_auth(mock_transport):
    """无凭据的OKCoin客户端"""
    from okcoin import OKCoinAPI

    client = OKCoinAPI(transport=mock_transport)
    yield client
    client.close()
