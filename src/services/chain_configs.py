#chain_configs.py

from urllib.parse import quote

from explorer import config
from explorer.models import Kind, Network


def explorer_url(network, kind, value: str) -> str:
    """네트워크별 공개 익스플로러 딥링크. 지원하지 않으면 빈 문자열"""
    try:
        cfg = get_chain_configs().get(Network(network))
    except ValueError:
        return ""
    if not cfg or not value:
        return ""
    template = cfg["explorer_tx"] if kind == Kind.TX else cfg["explorer_address"]
    return template + quote(value, safe="")


def get_chain_configs():
    return {
        Network.BTC: {
            "name": "Bitcoin",
            "symbol": "BTC",
            "coin_id": "bitcoin",
            "divisor": 1e8,
            "decimals": 8,
            "adapter": "blockcypher",
            "explorer_tx": "https://www.blockchain.com/btc/tx/",
            "explorer_address": "https://www.blockchain.com/btc/address/",
            "api": lambda addr: f"{config.BLOCKCYPHER_API_URL}/btc/main/addrs/{quote(addr, safe='')}",
        },
        Network.LTC: {
            "name": "Litecoin",
            "symbol": "LTC",
            "coin_id": "litecoin",
            "divisor": 1e8,
            "decimals": 8,
            "adapter": "blockcypher",
            "explorer_tx": "https://blockchair.com/litecoin/transaction/",
            "explorer_address": "https://blockchair.com/litecoin/address/",
            "api": lambda addr: f"{config.BLOCKCYPHER_API_URL}/ltc/main/addrs/{quote(addr, safe='')}",
        },
        Network.ETH: {
            "name": "Ethereum",
            "symbol": "ETH",
            "coin_id": "ethereum",
            "divisor": 1e18,
            "decimals": 6,
            "adapter": "blockcypher",
            "explorer_tx": "https://etherscan.io/tx/",
            "explorer_address": "https://etherscan.io/address/",
            "api": lambda addr: f"{config.BLOCKCYPHER_API_URL}/eth/main/addrs/{quote(addr, safe='')}",
        },
        Network.TRON: {
            "name": "Tron",
            "symbol": "TRX",
            "coin_id": "tron",
            "divisor": 1e6,
            "decimals": 6,
            "adapter": "tronscan",
            "explorer_tx": "https://tronscan.org/#/transaction/",
            "explorer_address": "https://tronscan.org/#/address/",
            "api": lambda addr: f"{config.TRONSCAN_API_URL}/account",
            "txs_api": lambda addr: f"{config.TRONSCAN_API_URL}/transaction",
        },
        Network.TON: {
            "name": "TON",
            "symbol": "TON",
            "coin_id": "the-open-network",
            "divisor": 1e9,
            "decimals": 6,
            "adapter": "tonapi",
            "explorer_tx": "https://tonviewer.com/transaction/",
            "explorer_address": "https://tonviewer.com/",
            "api": lambda addr: f"{config.TONAPI_URL}/accounts/{quote(addr, safe='')}",
            "events_api": lambda addr: f"{config.TONAPI_URL}/accounts/{quote(addr, safe='')}/events",
            "nfts_api": lambda addr: f"{config.TONAPI_URL}/accounts/{quote(addr, safe='')}/nfts",
        },
    }
