"""
Chain identifiers and default values used when resolving transaction gas
"""
from typing import Dict


class CHAIN_IDS:
    """Hex chain identifiers for networks with gas policy overrides"""
    MAINNET = '0x1'
    SEPOLIA = '0xaa36a7'
    OPTIMISM = '0xa'
    OPTIMISM_SEPOLIA = '0xaa37dc'
    CRONOS = '0x19'
    CRONOS_TESTNET = '0x152'


# Gas of a plain value transfer to an account without code (21000)
FIXED_GAS = '0x5208'

DEFAULT_GAS_MULTIPLIER = 1.5

# Percent of the block gas limit used when the node cannot simulate the call
GAS_ESTIMATE_FALLBACK_BLOCK_PERCENT = 35

# A buffered estimate never exceeds this percent of the block gas limit
MAX_GAS_BLOCK_PERCENT = 90

GAS_BUFFER_CHAIN_OVERRIDES: Dict[str, float] = {
    CHAIN_IDS.OPTIMISM: 1,
    CHAIN_IDS.OPTIMISM_SEPOLIA: 1,
}

# Fee fields are never sent to a gas simulation
GAS_FEE_FIELDS = ('gasPrice', 'maxFeePerGas', 'maxPriorityFeePerGas')
