"""
JSON-RPC helpers for gas resolution - node queries and hex conversion
"""
import logging
import os
from typing import Any, Dict, List, Optional

from eth_utils import add_0x_prefix, to_int
from web3 import AsyncWeb3
from web3.types import RPCEndpoint

from .exceptions import RPCError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "http://127.0.0.1:8545"

# Shared provider instance (initialized on first use)
_provider: Optional[AsyncWeb3] = None


def get_provider(rpc_url: Optional[str] = None) -> AsyncWeb3:
    """Get or create the shared AsyncWeb3 provider"""
    global _provider
    if rpc_url:
        return AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url))
    if _provider is None:
        _provider = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(os.getenv("GAS_RPC_URL", DEFAULT_RPC_URL)))
    return _provider


async def query(rpc_client: AsyncWeb3, method: str, params: Optional[List[Any]] = None) -> Any:
    """
    Send `eth_<method>` to the node and return the raw result

    Results are returned exactly as the node encodes them (hex strings),
    without web3's formatters.

    Raises:
        RPCError: the node answered with a JSON-RPC error
    """
    response: Dict[str, Any] = await rpc_client.provider.make_request(
        RPCEndpoint(f"eth_{method}"), params or []
    )
    if response.get('error') is not None:
        raise RPCError.from_response(response['error'])
    return response.get('result')


async def get_code(rpc_client: AsyncWeb3, address: str) -> Optional[str]:
    """Byte code deployed at `address`, or None / '0x' for accounts"""
    try:
        return await query(rpc_client, 'getCode', [address, 'latest'])
    except Exception as e:
        logger.error(f"Failed to fetch code for {address}: {e}")
        raise TransportError('getCode', str(e)) from e


async def get_latest_block(rpc_client: AsyncWeb3) -> Dict[str, Any]:
    """Latest block header (gasLimit and number as hex strings)"""
    try:
        block = await query(rpc_client, 'getBlockByNumber', ['latest', False])
    except Exception as e:
        logger.error(f"Failed to fetch latest block: {e}")
        raise TransportError('getBlockByNumber', str(e)) from e

    if not block or not block.get('gasLimit'):
        raise TransportError('getBlockByNumber', "latest block has no gasLimit")
    return block


def is_empty_code(code: Optional[str]) -> bool:
    return not code or code == '0x'


def add_hex_prefix(value: str) -> str:
    return add_0x_prefix(value)


def hex_to_int(value: str) -> int:
    return to_int(hexstr=value)


def to_hex(value: int) -> str:
    return hex(value)
