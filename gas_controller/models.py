"""
Data models for transaction gas resolution
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionParams(BaseModel):
    """Hex-encoded transaction fields as sent over JSON-RPC"""
    model_config = ConfigDict(populate_by_name=True, extra='allow')

    from_address: Optional[str] = Field(None, alias='from')
    to: Optional[str] = None
    data: Optional[str] = None
    value: Optional[str] = None
    gas: Optional[str] = None
    gas_price: Optional[str] = Field(None, alias='gasPrice')
    max_fee_per_gas: Optional[str] = Field(None, alias='maxFeePerGas')
    max_priority_fee_per_gas: Optional[str] = Field(None, alias='maxPriorityFeePerGas')

    def to_rpc(self) -> Dict[str, str]:
        """camelCase dict of the fields that are set"""
        return self.model_dump(by_alias=True, exclude_none=True)


class SimulationFailureDebug(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    block_gas_limit: str = Field(alias='blockGasLimit')
    block_number: Optional[str] = Field(None, alias='blockNumber')


class SimulationFailure(BaseModel):
    """Why the node could not simulate a transaction"""
    model_config = ConfigDict(populate_by_name=True)

    reason: str
    error_key: Optional[str] = Field(None, alias='errorKey')
    debug: SimulationFailureDebug


class DefaultGasEstimates(BaseModel):
    gas: Optional[str] = None


class TransactionMeta(BaseModel):
    """Transaction record whose gas fields are filled in by the resolver"""
    model_config = ConfigDict(populate_by_name=True, extra='allow')

    id: Optional[str] = None
    tx_params: TransactionParams = Field(default_factory=TransactionParams, alias='txParams')
    original_gas_estimate: Optional[str] = Field(None, alias='originalGasEstimate')
    gas_limit_no_buffer: Optional[str] = Field(None, alias='gasLimitNoBuffer')
    default_gas_estimates: Optional[DefaultGasEstimates] = Field(None, alias='defaultGasEstimates')
    simulation_fails: Optional[SimulationFailure] = Field(None, alias='simulationFails')

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass
class UpdateGasRequest:
    """A single gas resolution for one transaction record"""
    tx_meta: TransactionMeta
    chain_id: str
    is_custom_network: bool
    rpc_client: Any


class EstimateOutcome(str, Enum):
    """Whether the node simulated the call or the fallback was used"""
    OK = "ok"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class GasEstimate:
    """Result of a raw gas estimate"""
    outcome: EstimateOutcome
    estimated_gas: str
    block_gas_limit: str
    simulation_fails: Optional[SimulationFailure] = None

    @property
    def is_fallback(self) -> bool:
        return self.outcome == EstimateOutcome.FALLBACK


class ResolutionKind(str, Enum):
    """Which rule produced the final gas value"""
    EXPLICIT = "explicit"
    FIXED = "fixed"
    ESTIMATED = "estimated"


@dataclass(frozen=True)
class GasResolution:
    """Outcome of the gas decision, applied to the record by `update_gas`"""
    kind: ResolutionKind
    value: str
    # Unbuffered estimate, only when a buffer was applied
    raw: Optional[str] = None
    simulation_fails: Optional[SimulationFailure] = None
