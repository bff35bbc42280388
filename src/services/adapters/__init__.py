# Upstream adapters
from . import blockcypher, tonapi, tronscan
from .base import AccountSnapshot

ADAPTERS = {
    "blockcypher": blockcypher.fetch,
    "tonapi": tonapi.fetch,
    "tronscan": tronscan.fetch,
}


def get_adapter(name: str):
    return ADAPTERS.get(name)


__all__ = [
    "AccountSnapshot",
    "ADAPTERS",
    "get_adapter",
]
