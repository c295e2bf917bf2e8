"""
Test doubles and constants shared by the test modules
"""
from typing import Any, Dict, List, Tuple

GAS_MOCK = 100
BLOCK_GAS_LIMIT_MOCK = 123456789
BLOCK_NUMBER_MOCK = '0x5678'
FALLBACK_MULTIPLIER = 35 / 100
MAX_GAS_MULTIPLIER = 90 / 100


def to_hex(value: int) -> str:
    return hex(value)


class FakeProvider:
    """Answers eth_* requests from a method -> response table"""

    def __init__(self, responses: Dict[str, Any]):
        self.responses = responses
        self.calls: List[Tuple[str, list]] = []

    async def make_request(self, method, params):
        self.calls.append((method, params))
        if method not in self.responses:
            raise AssertionError(f"Unexpected RPC call {method}")
        response = self.responses[method]
        if isinstance(response, Exception):
            raise response
        return response

    def called(self, method: str) -> bool:
        return any(name == method for name, _ in self.calls)

    def params_of(self, method: str) -> list:
        for name, params in self.calls:
            if name == method:
                return params
        raise AssertionError(f"{method} was not called")
