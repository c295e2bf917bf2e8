"""
Gas limit resolution for transactions prior to signing
"""
import logging
from typing import Optional

from .config import DEFAULT_CONFIG, GasConfig
from .gas_estimate import add_gas_buffer, estimate_gas
from .gas_utils import get_code, is_empty_code
from .models import (
    DefaultGasEstimates,
    GasResolution,
    ResolutionKind,
    UpdateGasRequest,
)

logger = logging.getLogger(__name__)


async def update_gas(request: UpdateGasRequest, config: Optional[GasConfig] = None) -> None:
    """
    Resolve the gas limit of `request.tx_meta` and record it in place

    Sets txParams.gas, defaultGasEstimates.gas and simulationFails. When the
    value was not supplied by the caller, originalGasEstimate is set too, and
    gasLimitNoBuffer when a buffer was applied to the estimate.

    Simulation failures are recorded rather than raised. Failing block or code
    lookups raise TransportError.
    """
    config = config or DEFAULT_CONFIG
    tx_meta = request.tx_meta

    resolution = await resolve_gas(request, config)

    tx_meta.tx_params.gas = resolution.value
    tx_meta.simulation_fails = resolution.simulation_fails

    if resolution.kind != ResolutionKind.EXPLICIT:
        tx_meta.original_gas_estimate = resolution.value

    if resolution.raw is not None:
        tx_meta.gas_limit_no_buffer = resolution.raw

    if tx_meta.default_gas_estimates is None:
        tx_meta.default_gas_estimates = DefaultGasEstimates()
    tx_meta.default_gas_estimates.gas = resolution.value

    logger.info(
        f"Resolved gas {resolution.value} ({resolution.kind.value}) "
        f"for transaction {tx_meta.id or '<unsaved>'} on chain {request.chain_id}"
    )


async def resolve_gas(request: UpdateGasRequest, config: Optional[GasConfig] = None) -> GasResolution:
    """Decide the gas limit without touching the transaction record"""
    config = config or DEFAULT_CONFIG
    tx_params = request.tx_meta.tx_params

    if tx_params.gas:
        logger.debug(f"Using value from request {tx_params.gas}")
        return GasResolution(kind=ResolutionKind.EXPLICIT, value=tx_params.gas)

    if await requires_fixed_gas(request):
        logger.debug(f"Using fixed value {config.fixed_gas}")
        return GasResolution(kind=ResolutionKind.FIXED, value=config.fixed_gas)

    estimate = await estimate_gas(tx_params, request.rpc_client, config)

    if estimate.is_fallback:
        logger.debug(f"Using fallback estimate {estimate.estimated_gas}")
        return GasResolution(
            kind=ResolutionKind.ESTIMATED,
            value=estimate.estimated_gas,
            simulation_fails=estimate.simulation_fails,
        )

    if request.is_custom_network:
        logger.debug("Using original estimate as custom network")
        return GasResolution(kind=ResolutionKind.ESTIMATED, value=estimate.estimated_gas)

    multiplier = config.multiplier_for(request.chain_id)
    buffered = add_gas_buffer(
        estimate.estimated_gas, estimate.block_gas_limit, multiplier, config
    )
    return GasResolution(
        kind=ResolutionKind.ESTIMATED,
        value=buffered,
        raw=estimate.estimated_gas,
    )


async def requires_fixed_gas(request: UpdateGasRequest) -> bool:
    """True for plain transfers to an address without code on a known network"""
    tx_params = request.tx_meta.tx_params

    if request.is_custom_network or not tx_params.to or tx_params.data:
        return False

    code = await get_code(request.rpc_client, tx_params.to)
    return is_empty_code(code)
