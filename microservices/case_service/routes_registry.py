"""
Case Service Routes Registry

Defines service metadata and routes for API documentation.
"""

SERVICE_METADATA = {
    "service_name": "case_service",
    "version": "1.0.0",
    "tags": ["v1", "cases", "fir", "ledger", "microservice"],
    "capabilities": [
        "case_filing",
        "case_status_updates",
        "case_seeding",
        "case_listing",
        "raw_transactions",
    ],
}

# Route definitions for API documentation
ROUTES = [
    # Health endpoints
    {"path": "/health", "methods": ["GET"], "description": "Health check"},
    {"path": "/api/v1/cases/health", "methods": ["GET"], "description": "Service health check (API v1)"},

    # Service info
    {"path": "/api/v1/cases/info", "methods": ["GET"], "description": "Service information"},

    # Raw invocation
    {"path": "/api/v1/cases/transactions/{function_name}", "methods": ["POST"], "description": "Submit transaction"},
    {"path": "/api/v1/cases/evaluate/{function_name}", "methods": ["POST"], "description": "Evaluate transaction"},

    # Records
    {"path": "/api/v1/cases/seed", "methods": ["POST"], "description": "Seed bootstrap cases"},
    {"path": "/api/v1/cases", "methods": ["POST"], "description": "File a case"},
    {"path": "/api/v1/cases", "methods": ["GET"], "description": "List cases"},
    {"path": "/api/v1/cases/{case_id}", "methods": ["GET"], "description": "Read case"},
    {"path": "/api/v1/cases/{case_id}", "methods": ["DELETE"], "description": "Delete case"},
    {"path": "/api/v1/cases/{case_id}/status", "methods": ["PATCH"], "description": "Update case status"},
    {"path": "/api/v1/cases/{case_id}/exists", "methods": ["GET"], "description": "Case existence check"},
]


def get_route_summary():
    """Get route metadata for service info"""
    route_paths = [r["path"] for r in ROUTES]
    return {
        "route_count": str(len(ROUTES)),
        "routes": ",".join(route_paths[:10]),
        "api_version": "v1",
        "base_path": "/api/v1/cases",
    }


__all__ = ["SERVICE_METADATA", "ROUTES", "get_route_summary"]
