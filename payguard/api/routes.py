import logging
from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, Depends, HTTPException

from payguard.schemas import ScanRequest, ScanResponse, QuickScanExample, HealthResponse
from payguard.services.analysis_service import AnalysisService
from payguard.core.samples import QUICK_SCAN_EXAMPLES
from payguard.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

_service = AnalysisService()

def get_analysis_service() -> AnalysisService:
    """Dependency for FastAPI routes"""
    return _service

# ============================================================================
# SCAN ENDPOINTS
# ============================================================================

@router.post("/scan", response_model=ScanResponse)
async def scan_message(
    request: ScanRequest,
    service: AnalysisService = Depends(get_analysis_service)
):
    """Score an SMS, pasted message or link"""
    if len(request.text) > settings.MAX_CONTENT_LENGTH:
        raise HTTPException(
            status_code=413,
            detail=f"Content exceeds {settings.MAX_CONTENT_LENGTH} characters"
        )

    try:
        verdict = await service.analyze_async(request.text, request.sender)
    except Exception as e:
        logger.error(f"❌ Error in /scan: {e}")
        raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")

    return ScanResponse(
        **verdict.model_dump(),
        sender=request.sender_label or request.sender,
        scanned_at=datetime.now(timezone.utc)
    )

@router.get("/scan/examples", response_model=List[QuickScanExample])
def list_examples():
    return [QuickScanExample(**example) for example in QUICK_SCAN_EXAMPLES]

# ============================================================================
# HEALTH
# ============================================================================

@router.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        service=settings.APP_NAME,
        version=settings.VERSION
    )
