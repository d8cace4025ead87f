# -*- coding: utf-8 -*-
"""
客户端配置模块
"""

import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .exceptions import ValidationException

DEFAULT_BASE_URL = "https://www.okcoin.cn/api"
DEFAULT_API_VERSION = "v1"
DEFAULT_TIMEOUT = 10
DEFAULT_MAX_WORKERS = 8

# settings 字典中允许覆盖的键 -> ClientConfig 字段
SETTINGS_FIELDS = {
    'url': 'base_url',
    'version': 'api_version',
    'timeout': 'timeout',
    'max_workers': 'max_workers',
}


@dataclass(frozen=True)
class Credentials:
    """API凭据"""
    api_key: Optional[str] = None
    secret: Optional[str] = field(default=None, repr=False)

    @property
    def complete(self) -> bool:
        return bool(self.api_key and self.secret)


@dataclass(frozen=True)
class ClientConfig:
    """客户端配置，创建后不可修改"""
    credentials: Credentials = field(default_factory=Credentials)
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        if not self.base_url:
            raise ValidationException("base_url must be a non-empty string")
        if not self.api_version:
            raise ValidationException("api_version must be a non-empty string")
        if self.max_workers < 1:
            raise ValidationException(f"max_workers must be positive: {self.max_workers}")
        object.__setattr__(self, 'base_url', self.base_url.rstrip('/'))

    def endpoint_url(self, endpoint: str) -> str:
        """返回接口完整URL: {base_url}/{version}/{endpoint}.do"""
        return f"{self.base_url}/{self.api_version}/{endpoint}.do"

    @classmethod
    def from_settings(cls, api_key: str = None, secret: str = None,
                      settings: Dict[str, Any] = None) -> 'ClientConfig':
        """
        根据构造参数创建配置

        Args:
            api_key: API key
            secret: API secret
            settings: 可选覆盖项 (url, version, timeout, max_workers)
        """
        settings = settings or {}
        unknown = set(settings) - set(SETTINGS_FIELDS)
        if unknown:
            raise ValidationException(f"Unknown settings: {sorted(unknown)}")

        overrides = {SETTINGS_FIELDS[key]: value for key, value in settings.items()}
        return cls(credentials=Credentials(api_key, secret), **overrides)

    @classmethod
    def from_env(cls, prefix: str = "OKCOIN_") -> 'ClientConfig':
        """
        从环境变量 (及 .env 文件) 加载配置

        读取 {prefix}API_KEY, {prefix}SECRET_KEY, {prefix}BASE_URL, {prefix}API_VERSION
        """
        load_dotenv()
        config = cls(credentials=Credentials(
            os.getenv(f'{prefix}API_KEY'),
            os.getenv(f'{prefix}SECRET_KEY'),
        ))

        overrides = {}
        if os.getenv(f'{prefix}BASE_URL'):
            overrides['base_url'] = os.getenv(f'{prefix}BASE_URL')
        if os.getenv(f'{prefix}API_VERSION'):
            overrides['api_version'] = os.getenv(f'{prefix}API_VERSION')
        return replace(config, **overrides) if overrides else config
