"""
Case Microservice API

Invocation surface for the FIR case contract: raw transaction
submission and evaluation plus resource-style case routes.
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

from .factory import create_case_runner
from .models import (
    CASE_FIELDS,
    CaseExistsResponse,
    CaseListResponse,
    CaseOperationResponse,
    CaseRecord,
    CaseStatusUpdateRequest,
    HealthResponse,
    ServiceInfo,
    TransactionRequest,
    TransactionResponse,
)
from .routes_registry import SERVICE_METADATA, get_route_summary

config = get_settings()

# Configure logger
logger = setup_service_logger("case_service", level=config.logging.log_level, config=config.logging)

# Global variables
runner: Optional[ContractRunner] = None
SERVICE_PORT = config.case_service_port


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    global runner

    try:
        runner = create_case_runner(config=config)

        contract = runner.contract
        policy = contract.gate.policy
        ungated = [op for op in policy.open_operations() if op in contract.transaction_names()]
        if ungated:
            logger.warning(
                f"Access policy '{policy.profile}' leaves case operations ungated: {', '.join(ungated)}"
            )

        route_meta = get_route_summary()
        logger.info(
            f"Case service started on port {SERVICE_PORT} "
            f"({route_meta['route_count']} routes, channel {runner.ledger.channel_name})"
        )
        yield

    except Exception as e:
        logger.error(f"Failed to initialize case service: {e}")
        raise
    finally:
        logger.info("Case service stopped")


# Create FastAPI app
app = FastAPI(
    title="Case Service",
    description="First information report case records on the ledger",
    version=SERVICE_METADATA["version"],
    lifespan=lifespan,
)


# ====================
# Dependency Injection
# ====================


async def get_runner() -> ContractRunner:
    """Get case contract runner"""
    if not runner:
        raise HTTPException(status_code=503, detail="Case service not initialized")
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


@app.get("/api/v1/cases/health", response_model=HealthResponse)
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


@app.get("/api/v1/cases/info", response_model=ServiceInfo)
async def get_service_info(runner: ContractRunner = Depends(get_runner)):
    """Get service information"""
    contract = runner.contract
    return ServiceInfo(
        service=SERVICE_METADATA["service_name"],
        version=SERVICE_METADATA["version"],
        description="First information report case records on the ledger",
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


@app.post("/api/v1/cases/transactions/{function_name}", response_model=TransactionResponse)
async def submit_transaction(
    function_name: str,
    request: TransactionRequest,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Submit a transaction by name; commits on success"""
    result = await _submit(runner, identity, function_name, *request.args)
    return TransactionResponse(success=True, function=function_name, result=result)


@app.post("/api/v1/cases/evaluate/{function_name}", response_model=TransactionResponse)
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
# Case Records API
# ====================


@app.post("/api/v1/cases/seed", response_model=CaseOperationResponse)
async def seed_cases(
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Write the bootstrap FIRs"""
    await _submit(runner, identity, "seedCases")
    return CaseOperationResponse(success=True, message="Case ledger seeded")


@app.post("/api/v1/cases", response_model=CaseOperationResponse)
async def file_case(
    record: CaseRecord,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """File a new case"""
    args = [record.case_id] + [getattr(record, name) for name in CASE_FIELDS]
    await _submit(runner, identity, "fileCase", *args)
    return CaseOperationResponse(success=True, message="Case filed", case_id=record.case_id)


@app.get("/api/v1/cases", response_model=CaseListResponse)
async def list_cases(
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """List every case"""
    records = await _evaluate(runner, identity, "listAllCases") or []
    return CaseListResponse(records=records, count=len(records))


@app.get("/api/v1/cases/{case_id}/exists", response_model=CaseExistsResponse)
async def case_exists(
    case_id: str,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Check whether a case exists"""
    exists = await _evaluate(runner, identity, "caseExists", case_id)
    return CaseExistsResponse(case_id=case_id, exists=bool(exists))


@app.get("/api/v1/cases/{case_id}")
async def read_case(
    case_id: str,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Read a case"""
    return await _evaluate(runner, identity, "readCase", case_id)


@app.patch("/api/v1/cases/{case_id}/status", response_model=CaseOperationResponse)
async def update_case_status(
    case_id: str,
    request: CaseStatusUpdateRequest,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Change the status of a case"""
    await _submit(runner, identity, "updateCaseStatus", case_id, request.status)
    return CaseOperationResponse(success=True, message="Case status updated", case_id=case_id)


@app.delete("/api/v1/cases/{case_id}", response_model=CaseOperationResponse)
async def delete_case(
    case_id: str,
    runner: ContractRunner = Depends(get_runner),
    identity: ClientIdentity = Depends(get_client_identity),
):
    """Delete a case"""
    await _submit(runner, identity, "deleteCase", case_id)
    return CaseOperationResponse(success=True, message="Case deleted", case_id=case_id)


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
        "microservices.case_service.main:app",
        host=config.default_host,
        port=SERVICE_PORT,
        reload=config.debug,
        log_level=config.logging.log_level.lower(),
    )
