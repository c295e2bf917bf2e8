"""
Tests for gas configuration
"""
import os

import pytest

from gas_controller.config import DEFAULT_CONFIG, GasConfig
from gas_controller.constants import CHAIN_IDS
from gas_controller.exceptions import ConfigError

ENV_VARS = (
    'GAS_FALLBACK_BLOCK_PERCENT',
    'GAS_MAX_BLOCK_PERCENT',
    'GAS_DEFAULT_MULTIPLIER',
    'GAS_FIXED_GAS',
    'GAS_CHAIN_MULTIPLIERS',
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return str(tmp_path / '.env')


def test_defaults():
    assert DEFAULT_CONFIG.fallback_block_percent == 35
    assert DEFAULT_CONFIG.max_block_percent == 90
    assert DEFAULT_CONFIG.default_multiplier == 1.5
    assert DEFAULT_CONFIG.fixed_gas == '0x5208'


def test_multiplier_for_override_chain():
    assert DEFAULT_CONFIG.multiplier_for(CHAIN_IDS.OPTIMISM) == 1
    assert DEFAULT_CONFIG.multiplier_for('0xA') == 1
    assert DEFAULT_CONFIG.multiplier_for(10) == 1


def test_multiplier_for_unknown_chain_uses_default():
    assert DEFAULT_CONFIG.multiplier_for(CHAIN_IDS.MAINNET) == 1.5
    assert DEFAULT_CONFIG.multiplier_for(None) == 1.5


def test_overrides_are_normalized():
    config = GasConfig(chain_multiplier_overrides={'0x0A': 1.2, '56': 1.1})

    assert config.chain_multiplier_overrides == {'0xa': 1.2, '0x38': 1.1}
    assert config.multiplier_for('0x38') == 1.1


def test_fixed_gas_is_prefixed():
    assert GasConfig(fixed_gas='5208').fixed_gas == '0x5208'


@pytest.mark.parametrize('values', [
    {'fallback_block_percent': 101},
    {'max_block_percent': 0},
    {'default_multiplier': 0.5},
    {'fixed_gas': 'not-hex'},
    {'chain_multiplier_overrides': {'0x1': 0.9}},
])
def test_rejects_invalid_values(values):
    with pytest.raises(ValueError):
        GasConfig(**values)


def test_from_env(monkeypatch, clean_env):
    monkeypatch.setenv('GAS_FALLBACK_BLOCK_PERCENT', '40')
    monkeypatch.setenv('GAS_MAX_BLOCK_PERCENT', '80')
    monkeypatch.setenv('GAS_DEFAULT_MULTIPLIER', '1.2')
    monkeypatch.setenv('GAS_FIXED_GAS', '0x5209')
    monkeypatch.setenv('GAS_CHAIN_MULTIPLIERS', '{"0x19": 1.1}')

    config = GasConfig.from_env(clean_env)

    assert config.fallback_block_percent == 40
    assert config.max_block_percent == 80
    assert config.default_multiplier == 1.2
    assert config.fixed_gas == '0x5209'
    assert config.multiplier_for(CHAIN_IDS.CRONOS) == 1.1


def test_from_env_without_variables(clean_env):
    assert GasConfig.from_env(clean_env) == GasConfig()


def test_from_env_reads_dotenv_file(clean_env):
    with open(clean_env, 'w') as f:
        f.write('GAS_MAX_BLOCK_PERCENT=70\n')

    try:
        assert GasConfig.from_env(clean_env).max_block_percent == 70
    finally:
        os.environ.pop('GAS_MAX_BLOCK_PERCENT', None)


def test_from_env_invalid_json(monkeypatch, clean_env):
    monkeypatch.setenv('GAS_CHAIN_MULTIPLIERS', '{0x19: 1.1')

    with pytest.raises(ConfigError, match='GAS_CHAIN_MULTIPLIERS'):
        GasConfig.from_env(clean_env)


def test_from_env_invalid_value(monkeypatch, clean_env):
    monkeypatch.setenv('GAS_MAX_BLOCK_PERCENT', '250')

    with pytest.raises(ConfigError):
        GasConfig.from_env(clean_env)
