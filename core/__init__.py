# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Domain value models, the forecast aggregate and Pydantic schemas
# - mappers.py: Conversions between API, domain and storage shapes
# - services/: Forecast orchestration over the forecast store
#
# Code in this package should NOT import from FastAPI routing.
# This keeps the logic testable and reusable.
# =============================================================================
