"""
Transaction gas limit resolution
"""
from .config import DEFAULT_CONFIG, GasConfig
from .constants import (
    CHAIN_IDS,
    DEFAULT_GAS_MULTIPLIER,
    FIXED_GAS,
    GAS_BUFFER_CHAIN_OVERRIDES,
    GAS_ESTIMATE_FALLBACK_BLOCK_PERCENT,
    MAX_GAS_BLOCK_PERCENT,
)
from .exceptions import ConfigError, GasControllerError, RPCError, TransportError
from .gas import requires_fixed_gas, resolve_gas, update_gas
from .gas_estimate import add_gas_buffer, estimate_gas
from .models import (
    DefaultGasEstimates,
    EstimateOutcome,
    GasEstimate,
    GasResolution,
    ResolutionKind,
    SimulationFailure,
    SimulationFailureDebug,
    TransactionMeta,
    TransactionParams,
    UpdateGasRequest,
)

__all__ = [
    'CHAIN_IDS',
    'DEFAULT_CONFIG',
    'DEFAULT_GAS_MULTIPLIER',
    'FIXED_GAS',
    'GAS_BUFFER_CHAIN_OVERRIDES',
    'GAS_ESTIMATE_FALLBACK_BLOCK_PERCENT',
    'MAX_GAS_BLOCK_PERCENT',
    'ConfigError',
    'DefaultGasEstimates',
    'EstimateOutcome',
    'GasConfig',
    'GasControllerError',
    'GasEstimate',
    'GasResolution',
    'RPCError',
    'ResolutionKind',
    'SimulationFailure',
    'SimulationFailureDebug',
    'TransactionMeta',
    'TransactionParams',
    'TransportError',
    'UpdateGasRequest',
    'add_gas_buffer',
    'estimate_gas',
    'requires_fixed_gas',
    'resolve_gas',
    'update_gas',
]
