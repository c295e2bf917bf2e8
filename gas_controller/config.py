"""
Gas resolution configuration

Values default to the observed network policy and can be tuned per deployment
through environment variables (optionally loaded from a .env file).
"""
import json
import logging
import os
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import (
    DEFAULT_GAS_MULTIPLIER,
    FIXED_GAS,
    GAS_BUFFER_CHAIN_OVERRIDES,
    GAS_ESTIMATE_FALLBACK_BLOCK_PERCENT,
    MAX_GAS_BLOCK_PERCENT,
)
from .exceptions import ConfigError

logger = logging.getLogger(__name__)


class GasConfig(BaseModel):
    """Policy values injected into the gas resolver"""
    fallback_block_percent: int = Field(GAS_ESTIMATE_FALLBACK_BLOCK_PERCENT, ge=0, le=100)
    max_block_percent: int = Field(MAX_GAS_BLOCK_PERCENT, ge=1, le=100)
    default_multiplier: float = Field(DEFAULT_GAS_MULTIPLIER, ge=1)
    fixed_gas: str = FIXED_GAS
    chain_multiplier_overrides: Dict[str, float] = Field(
        default_factory=lambda: dict(GAS_BUFFER_CHAIN_OVERRIDES)
    )

    @field_validator('fixed_gas')
    @classmethod
    def _check_fixed_gas(cls, value: str) -> str:
        try:
            int(value, 16)
        except ValueError:
            raise ValueError(f"fixed_gas must be a hex string, got {value!r}")
        if not value.lower().startswith('0x'):
            value = '0x' + value
        return value.lower()

    @field_validator('chain_multiplier_overrides')
    @classmethod
    def _normalize_chain_ids(cls, value: Dict[str, float]) -> Dict[str, float]:
        normalized = {}
        for chain_id, multiplier in value.items():
            if multiplier < 1:
                raise ValueError(f"multiplier for chain {chain_id} must be >= 1")
            normalized[_normalize_chain_id(chain_id)] = multiplier
        return normalized

    def multiplier_for(self, chain_id: Optional[str]) -> float:
        """Buffer multiplier for a chain, falling back to the default"""
        if chain_id is None:
            return self.default_multiplier
        return self.chain_multiplier_overrides.get(
            _normalize_chain_id(chain_id), self.default_multiplier
        )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "GasConfig":
        """Build a config from GAS_* environment variables"""
        load_dotenv(dotenv_path)

        values = {}
        env_fields = {
            'GAS_FALLBACK_BLOCK_PERCENT': 'fallback_block_percent',
            'GAS_MAX_BLOCK_PERCENT': 'max_block_percent',
            'GAS_DEFAULT_MULTIPLIER': 'default_multiplier',
            'GAS_FIXED_GAS': 'fixed_gas',
        }
        for env_name, field_name in env_fields.items():
            raw = os.getenv(env_name)
            if raw:
                values[field_name] = raw

        overrides = os.getenv('GAS_CHAIN_MULTIPLIERS')
        if overrides:
            try:
                values['chain_multiplier_overrides'] = json.loads(overrides)
            except json.JSONDecodeError as e:
                raise ConfigError(f"GAS_CHAIN_MULTIPLIERS is not valid JSON: {e}") from e

        try:
            config = cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid gas configuration: {e}") from e

        logger.debug(f"Loaded gas config from environment: {config.model_dump()}")
        return config


def _normalize_chain_id(chain_id) -> str:
    if isinstance(chain_id, int):
        return hex(chain_id)
    chain_id = str(chain_id).strip().lower()
    if chain_id.startswith('0x'):
        return hex(int(chain_id, 16))
    if chain_id.isdigit():
        return hex(int(chain_id))
    return chain_id


DEFAULT_CONFIG = GasConfig()
