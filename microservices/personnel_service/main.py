"""
Personnel Microservice API

Invocation surface for the police personnel contract: raw transaction
submission and evaluation plus resource-style record routes.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.auth_dependencies import get_client_identity
from core.config import get_settings
from core.ledger import ClientIdentity, ContractRunner, LedgerContractError, decode_result, http_status_for
from core.logger import setup_service_logger

from .factory import create_personnel_runner
from .models import (
    PERSONNEL_FIELDS,
    HealthResponse,
    PersonnelExistsResponse,
    PersonnelListResponse,
    PersonnelOperationResponse,
    PersonnelRecord,
    PersonnelUpdateRequest,
    ServiceInfo,
    TransactionRequest,
    TransactionResponse,
)
from .routes_registry import SERVICE_METADATA, get_route_summary

config = get_settings()

# Configure logger
logger = setup_service_logger("personnel_service", level=config.logging.log_level, config=config.logging)

# Global variables
runner: Optional[ContractRunner] = None
SERVICE_PORT = config.personnel_service_port


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    global runner

    try:
        runner = create_personnel_runner(config=config)

        contract = runner.contract
        policy = contract.gate.policy
        ungated = [op for op in policy.open_operations() if op in contract.transaction_names()]
        if ungated:
            logger.warning(
                f"Access policy '{policy.profile}' leaves personnel operations ungated: {', '.join(ungated)}"
            )

        route_meta = get_route_summary()
        logger.info(
            f"Personnel service started on port {SERVICE_PORT} "
            f"({route_meta['route_count']} routes, channel {runner.ledger.channel_name})"
        )
        yield

    except Exception as e:
        logger.error(f"Failed to initialize personnel service: {e}")
        raise
    finally:
        logger.info("Personnel service stopped")


# Create FastAPI app
app = FastAPI(
    title="Personnel Service",
    description="Police personnel records on the ledger",
    version=SERVICE_METADATA["version"],
    lifespan=lifespan,
)


# ====================
# Dependency Injection
# ====================


async def get_runner() -> ContractRunner:
    """Get personnel contract runner"""
    if not runner:
        raise HTTPException(status_code=503, detail="Personnel service not initialized")
    return runner


def _contract_http_error(e: LedgerContractError) -> HTTPException:
    return HTTPException(status_code=http_status_for(e), detail=str(e))


async def _submit(runner: ContractRunner, identity: ClientIdentity, function_name: str, *args: str):
    try:
        return decode_result(
            await runner.submit_transaction(function_name, *args, identity=identity)
        )
    except LedgerContractError as e:
        raise _contract_http_error(e)


async def _evaluate(runner: ContractRunner, identity: ClientIdentity, function_name: str, *args: str):
    try:
        return decode_result(
            await runner.evaluate_transaction(function_name, *args, identity=identity)
        )
    except LedgerContractError as e:
        raise _contract_http_error(e)


# ====================
# Health Check and Service Info
# ====================


@app.get("/api/v1/personnel/health", response_model=HealthResponse)
@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check"""
    dependencies = {"ledger": "healthy" if runner else "unhealthy"}

    return HealthResponse(
        status="healthy" if all(v == "healthy" for v in dependencies.values()) else "degraded",
        service=SERVICE_METADATA["service_name"],
        port=SERVICE_PORT,
        version=SERVICE_METADATA["version"],
        dependencies=dependencies,
    )


@app.get("/api/v1/personnel/info", response_model=ServiceInfo)
async def get_service_info(runner: ContractRunner = Depends(get_runner)):
    """Get service information"""
    contract = runner.contract
    return ServiceInfo(
        service=SERVICE_METADATA["service_name"],
        version=SERVICE_METADATA["version"],
        description="Police personnel records on the ledger",
        capabilities=SERVICE_METADATA["capabilities"],
        transactions=contract.transaction_names(),
        access_policy=contract.gate.policy.profile,
        open_operations=[
            op for op in contract.gate.policy.open_operations()
            if op in contract.transaction_names()
        ],
    )


# ====================
# Raw Invocation API
# ====================


@app.post("/api/v1/personnel/transactions/{function_name}", response_model=TransactionResponse)
async def submit_transaction(
    function_name: str,
    request: TransactionRequest,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Submit a transaction by name; commits on success"""
    result = await _submit(runner, identity, function_name, *request.args)
    return TransactionResponse(success=True, function=function_name, result=result)


@app.post("/api/v1/personnel/evaluate/{function_name}", response_model=TransactionResponse)
async def evaluate_transaction(
    function_name: str,
    request: TransactionRequest,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Evaluate a transaction by name; never commits"""
    result = await _evaluate(runner, identity, function_name, *request.args)
    return TransactionResponse(success=True, function=function_name, result=result)


# ====================
# Personnel Records API
# ====================


@app.post("/api/v1/personnel/seed", response_model=PersonnelOperationResponse)
async def seed_personnel(
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Write the bootstrap personnel records"""
    await _submit(runner, identity, "seedPersonnel")
    return PersonnelOperationResponse(success=True, message="Personnel ledger seeded")


@app.post("/api/v1/personnel", response_model=PersonnelOperationResponse)
async def create_personnel(
    record: PersonnelRecord,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Create a personnel record"""
    args = [record.officer_id] + [getattr(record, name) for name in PERSONNEL_FIELDS]
    await _submit(runner, identity, "createPersonnel", *args)
    return PersonnelOperationResponse(
        success=True,
        message="Personnel record created",
        officer_id=record.officer_id,
    )


@app.get("/api/v1/personnel", response_model=PersonnelListResponse)
async def list_personnel(
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """List every personnel record"""
    records = await _evaluate(runner, identity, "listAllPersonnel") or []
    return PersonnelListResponse(records=records, count=len(records))


@app.get("/api/v1/personnel/{officer_id}/exists", response_model=PersonnelExistsResponse)
async def personnel_exists(
    officer_id: str,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Check whether a personnel record exists"""
    exists = await _evaluate(runner, identity, "personnelExists", officer_id)
    return PersonnelExistsResponse(officer_id=officer_id, exists=bool(exists))


@app.get("/api/v1/personnel/{officer_id}")
async def read_personnel(
    officer_id: str,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Read a personnel record"""
    return await _evaluate(runner, identity, "readPersonnel", officer_id)


@app.put("/api/v1/personnel/{officer_id}", response_model=PersonnelOperationResponse)
async def update_personnel(
    officer_id: str,
    request: PersonnelUpdateRequest,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Replace every field of a personnel record"""
    args = [officer_id] + [getattr(request, name) for name in PERSONNEL_FIELDS]
    await _submit(runner, identity, "updatePersonnel", *args)
    return PersonnelOperationResponse(
        success=True,
        message="Personnel record updated",
        officer_id=officer_id,
    )


@app.delete("/api/v1/personnel/{officer_id}", response_model=PersonnelOperationResponse)
async def delete_personnel(
    officer_id: str,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Delete a personnel record"""
    await _submit(runner, identity, "deletePersonnel", officer_id)
    return PersonnelOperationResponse(
        success=True,
        message="Personnel record deleted",
        officer_id=officer_id,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception in {request.url}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error occurred"}
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "microservices.personnel_service.main:app",
        host=config.default_host,
        port=SERVICE_PORT,
        reload=config.debug,
        log_level=config.logging.log_level.lower(),
    )
