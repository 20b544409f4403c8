"""
Personnel Service Routes Registry

Defines service metadata and routes for API documentation.
"""

SERVICE_METADATA = {
    "service_name": "personnel_service",
    "version": "1.0.0",
    "tags": ["v1", "personnel", "ledger", "microservice"],
    "capabilities": [
        "personnel_records",
        "personnel_seeding",
        "personnel_listing",
        "raw_transactions",
    ],
}

# Route definitions for API documentation
ROUTES = [
    # Health endpoints
    {"path": "/health", "methods": ["GET"], "description": "Health check"},
    {"path": "/api/v1/personnel/health", "methods": ["GET"], "description": "Service health check (API v1)"},

    # Service info
    {"path": "/api/v1/personnel/info", "methods": ["GET"], "description": "Service information"},

    # Raw invocation
    {"path": "/api/v1/personnel/transactions/{function_name}", "methods": ["POST"], "description": "Submit transaction"},
    {"path": "/api/v1/personnel/evaluate/{function_name}", "methods": ["POST"], "description": "Evaluate transaction"},

    # Records
    {"path": "/api/v1/personnel/seed", "methods": ["POST"], "description": "Seed bootstrap records"},
    {"path": "/api/v1/personnel", "methods": ["POST"], "description": "Create personnel record"},
    {"path": "/api/v1/personnel", "methods": ["GET"], "description": "List personnel records"},
    {"path": "/api/v1/personnel/{officer_id}", "methods": ["GET"], "description": "Read personnel record"},
    {"path": "/api/v1/personnel/{officer_id}", "methods": ["PUT"], "description": "Replace personnel record"},
    {"path": "/api/v1/personnel/{officer_id}", "methods": ["DELETE"], "description": "Delete personnel record"},
    {"path": "/api/v1/personnel/{officer_id}/exists", "methods": ["GET"], "description": "Personnel existence check"},
]


def get_route_summary():
    """Get route metadata for service info"""
    route_paths = [r["path"] for r in ROUTES]
    return {
        "route_count": str(len(ROUTES)),
        "routes": ",".join(route_paths[:10]),
        "api_version": "v1",
        "base_path": "/api/v1/personnel",
    }


__all__ = ["SERVICE_METADATA", "ROUTES", "get_route_summary"]
