"""Coverage catalog endpoints."""

from fastapi import APIRouter

from premiumcore.api.schemas.responses import CoverageTypeOut, ErrorResponse
from premiumcore.catalog import CoverageCatalog, get_default_catalog
from premiumcore.models import CoverageType

router = APIRouter(
    prefix="/coverages",
    tags=["Coverages"],
    responses={404: {"model": ErrorResponse}},
)

# Shared catalog (replaced by main.py when an override catalog is configured)
catalog: CoverageCatalog = get_default_catalog()


def set_catalog(c: CoverageCatalog):
    global catalog
    catalog = c


def _to_out(c: CoverageType) -> CoverageTypeOut:
    return CoverageTypeOut(
        id=c.id,
        name=c.name,
        description=c.description,
        base_rate=c.base_rate,
        min_coverage=c.min_coverage,
        max_coverage=c.max_coverage,
        features=list(c.features),
    )


@router.get("", response_model=list[CoverageTypeOut])
async def list_coverages():
    """List all coverage types in catalog order."""
    return [_to_out(c) for c in catalog]


@router.get("/{type_id}", response_model=CoverageTypeOut)
async def get_coverage(type_id: str):
    """Get one coverage type. Unknown ids return 404."""
    return _to_out(catalog.lookup(type_id))
