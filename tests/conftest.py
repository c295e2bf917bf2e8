"""
Shared fixtures: an in-memory JSON-RPC node
"""
from types import SimpleNamespace
from typing import Any, Dict

import pytest

from gas_controller.models import TransactionMeta, TransactionParams, UpdateGasRequest

from .helpers import FakeProvider


@pytest.fixture
def make_rpc_client():
    """
    Build a fake AsyncWeb3-like client

    Responses not given are not served; calling them fails the test.
    """
    def _make(
        get_code=None,
        block=None,
        estimate=None,
        estimate_error=None,
        block_error=None,
        code_error=None
    ):
        responses: Dict[str, Any] = {
            'eth_getCode': code_error or {'jsonrpc': '2.0', 'id': 1, 'result': get_code},
        }
        if block_error is not None:
            responses['eth_getBlockByNumber'] = block_error
        elif block is not None:
            responses['eth_getBlockByNumber'] = {'jsonrpc': '2.0', 'id': 2, 'result': block}
        if estimate_error is not None:
            responses['eth_estimateGas'] = {'jsonrpc': '2.0', 'id': 3, 'error': estimate_error}
        elif estimate is not None:
            responses['eth_estimateGas'] = {'jsonrpc': '2.0', 'id': 3, 'result': estimate}
        return SimpleNamespace(provider=FakeProvider(responses))

    return _make


@pytest.fixture
def tx_params():
    return TransactionParams(data='0x1', to='0x2')


@pytest.fixture
def update_gas_request(tx_params):
    return UpdateGasRequest(
        tx_meta=TransactionMeta(tx_params=tx_params),
        chain_id='0x0',
        is_custom_network=False,
        rpc_client=None,
    )
