# -*- coding: utf-8 -*-
"""
OKCoin REST API客户端
"""

from .exceptions import (
    OKCoinException,
    TransportException,
    ParseException,
    APIException,
    AuthenticationException,
    ValidationException,
    ClientClosedException
)
from .config import ClientConfig, Credentials
from .transport import RequestsTransport
from .client import OKCoinAPI

__all__ = [
    'OKCoinException',
    'TransportException',
    'ParseException',
    'APIException',
    'AuthenticationException',
    'ValidationException',
    'ClientClosedException',
    'ClientConfig',
    'Credentials',
    'RequestsTransport',
    'OKCoinAPI'
]

__version__ = '1.0.0'
