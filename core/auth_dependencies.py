"""
FastAPI Caller Identity Dependencies for Microservices

Builds the ledger client identity from the request headers. Contracts decide
what the identity may do; this layer never rejects a request on its own.
"""

from fastapi import Header, Request
from typing import Optional
import logging

from core.ledger import ClientIdentity

logger = logging.getLogger(__name__)

MSP_ID_HEADER = "X-MSP-ID"


async def get_client_identity(
    request: Request,
    x_msp_id: Optional[str] = Header(None, alias=MSP_ID_HEADER),
) -> ClientIdentity:
    """
    Identity dependency: organization MSP ID of the caller

    A request without the header gets an identity with no MSP ID, so gated
    transactions are denied while open ones still succeed.

    Usage:
        @app.get("/api/resource")
        async def get_resource(
            identity: ClientIdentity = Depends(get_client_identity)
        ):
            await runner.evaluate_transaction("readCase", case_id, identity=identity)
    """
    if not x_msp_id:
        logger.debug(f"No {MSP_ID_HEADER} header on request to {request.url.path}")
    return ClientIdentity(x_msp_id)


__all__ = [
    "MSP_ID_HEADER",
    "get_client_identity",
]
