"""
Raw gas estimation and safety buffers
"""
import logging
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP
from typing import Any, Dict, Optional

from web3 import AsyncWeb3

from .config import DEFAULT_CONFIG, GasConfig
from .constants import GAS_FEE_FIELDS
from .gas_utils import add_hex_prefix, get_latest_block, hex_to_int, query, to_hex
from .models import (
    EstimateOutcome,
    GasEstimate,
    SimulationFailure,
    SimulationFailureDebug,
    TransactionParams,
)

logger = logging.getLogger(__name__)


async def estimate_gas(
    tx_params: TransactionParams,
    rpc_client: AsyncWeb3,
    config: Optional[GasConfig] = None
) -> GasEstimate:
    """
    Ask the node to simulate a transaction

    If the simulation fails the error is not raised; the estimate falls back
    to a percentage of the latest block gas limit and the failure is returned
    in `simulation_fails`.

    Args:
        tx_params: Transaction to simulate
        rpc_client: AsyncWeb3 instance used for queries
        config: Gas policy (defaults to DEFAULT_CONFIG)

    Returns:
        GasEstimate with the estimate and the block gas limit it was made against

    Raises:
        TransportError: the latest block could not be fetched
    """
    config = config or DEFAULT_CONFIG

    block = await get_latest_block(rpc_client)
    block_gas_limit = block['gasLimit']
    block_number = block.get('number')

    request = normalize_estimate_request(tx_params)

    try:
        estimated_gas = await query(rpc_client, 'estimateGas', [request])
    except Exception as e:
        fallback_gas = fallback_gas_limit(block_gas_limit, config.fallback_block_percent)
        simulation_fails = SimulationFailure(
            reason=getattr(e, 'message', None) or str(e),
            error_key=getattr(e, 'error_key', None) or getattr(e, 'errorKey', None),
            debug=SimulationFailureDebug(
                block_gas_limit=block_gas_limit,
                block_number=block_number,
            ),
        )
        logger.warning(
            f"Gas simulation failed ({simulation_fails.error_key}): "
            f"{simulation_fails.reason}; using fallback {fallback_gas}"
        )
        return GasEstimate(
            outcome=EstimateOutcome.FALLBACK,
            estimated_gas=fallback_gas,
            block_gas_limit=block_gas_limit,
            simulation_fails=simulation_fails,
        )

    logger.debug(f"Estimated gas {estimated_gas} (block gas limit {block_gas_limit})")
    return GasEstimate(
        outcome=EstimateOutcome.OK,
        estimated_gas=estimated_gas,
        block_gas_limit=block_gas_limit,
    )


def normalize_estimate_request(tx_params: TransactionParams) -> Dict[str, Any]:
    """Call object for eth_estimateGas: no fee fields, prefixed data, value set"""
    request = tx_params.to_rpc()

    for field in GAS_FEE_FIELDS:
        request.pop(field, None)

    if request.get('data'):
        request['data'] = add_hex_prefix(request['data'])
    request['value'] = request.get('value') or '0x0'

    return request


def fallback_gas_limit(block_gas_limit: str, fallback_percent: int) -> str:
    """Percentage of the block gas limit, rounded down"""
    return to_hex(hex_to_int(block_gas_limit) * fallback_percent // 100)


def max_gas_limit(block_gas_limit: str, max_percent: int) -> int:
    """Highest gas a buffered estimate may reach, rounded half up"""
    cap = Decimal(hex_to_int(block_gas_limit)) * max_percent / 100
    return int(cap.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def add_gas_buffer(
    estimated_gas: str,
    block_gas_limit: str,
    multiplier: float,
    config: Optional[GasConfig] = None
) -> str:
    """
    Pad an estimate without exceeding a share of the block gas limit

    An estimate already at or above the cap is returned unchanged (as
    lowercase hex). Otherwise the padded estimate is returned, clamped to
    the cap.
    """
    config = config or DEFAULT_CONFIG

    estimated = hex_to_int(estimated_gas)
    cap = max_gas_limit(block_gas_limit, config.max_block_percent)

    if estimated >= cap:
        logger.debug(f"Using estimate {estimated_gas} as it is above the cap {cap}")
        return to_hex(estimated)

    padded = Decimal(estimated) * Decimal(str(multiplier))
    if padded < cap:
        buffered = to_hex(int(padded.to_integral_value(rounding=ROUND_FLOOR)))
        logger.debug(f"Using padded estimate {buffered} (multiplier {multiplier})")
        return buffered

    logger.debug(f"Using cap {cap} as padded estimate exceeds it")
    return to_hex(cap)
