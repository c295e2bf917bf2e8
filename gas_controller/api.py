"""
FastAPI endpoints for gas resolution
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from .config import GasConfig
from .exceptions import TransportError
from .gas import update_gas
from .gas_utils import get_provider
from .models import TransactionMeta, UpdateGasRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/gas", tags=["Gas"])

_config: Optional[GasConfig] = None


def get_gas_config() -> GasConfig:
    """Get or load the gas config from the environment"""
    global _config
    if _config is None:
        _config = GasConfig.from_env()
    return _config


def get_rpc_client():
    return get_provider()


class ResolveGasRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tx_meta: TransactionMeta = Field(alias='txMeta')
    chain_id: str = Field(alias='chainId')
    is_custom_network: bool = Field(False, alias='isCustomNetwork')


@router.post("/resolve")
async def resolve_gas_endpoint(
    body: ResolveGasRequest,
    config: GasConfig = Depends(get_gas_config),
    rpc_client: Any = Depends(get_rpc_client),
) -> Dict[str, Any]:
    """Resolve the gas limit of a transaction and return the updated record"""
    request = UpdateGasRequest(
        tx_meta=body.tx_meta,
        chain_id=body.chain_id,
        is_custom_network=body.is_custom_network,
        rpc_client=rpc_client,
    )
    try:
        await update_gas(request, config)
    except TransportError as e:
        logger.error(f"Gas resolution aborted: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return {"txMeta": request.tx_meta.to_dict()}


@router.get("/config")
async def get_config_endpoint(config: GasConfig = Depends(get_gas_config)) -> Dict[str, Any]:
    """Active gas policy"""
    return config.model_dump()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app = FastAPI(title="Gas Controller API", version="1.0.0")
    app.include_router(router)
    return app
