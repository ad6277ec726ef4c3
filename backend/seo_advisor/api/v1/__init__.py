"""API v1 router and endpoint organization."""

from fastapi import APIRouter

from seo_advisor.api.v1.endpoints import seo_analysis

router = APIRouter(tags=["v1"])

# Include domain-specific routers
router.include_router(seo_analysis.router, prefix="/seo", tags=["SEO Analysis"])
