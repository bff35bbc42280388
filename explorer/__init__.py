"""
익스플로러 공용 모듈 패키지
"""
from .configuration import config, ExplorerConfiguration
from .mongodb_client import mongodb_client
from .coingecko import coingecko_service, CoinGeckoService
from .models import (
    SENTINEL,
    AUTO,
    Network,
    Kind,
    Direction,
    ClassificationResult,
    UnifiedTransaction,
    NftItem,
    Summary,
    LookupResult,
    Comment,
)

__all__ = [
    'config',
    'ExplorerConfiguration',
    'mongodb_client',
    'coingecko_service',
    'CoinGeckoService',
    'SENTINEL',
    'AUTO',
    'Network',
    'Kind',
    'Direction',
    'ClassificationResult',
    'UnifiedTransaction',
    'NftItem',
    'Summary',
    'LookupResult',
    'Comment',
]
