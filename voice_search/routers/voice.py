import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from voice_search.core.exceptions import CatalogUnavailable
from voice_search.core.mongo import get_mongo_db, is_mongo_connected
from voice_search.schemas.voice import SearchInsights, VoiceSearchRequest, VoiceSearchResponse
from voice_search.services.analytics_service import AnalyticsService
from voice_search.services.keyword_extractor import get_search_description
from voice_search.services.response_service import CANNED_REPLIES, generate_response
from voice_search.services.voice_search_service import VoiceSearchService, get_voice_search_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/voice", tags=["voice"])


def get_analytics_service() -> AnalyticsService | None:
    if not is_mongo_connected():
        return None
    return AnalyticsService(get_mongo_db())


def require_analytics_service(
    service: AnalyticsService | None = Depends(get_analytics_service),
) -> AnalyticsService:
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Search analytics is disabled (MONGO_URL not configured)",
        )
    return service


@router.post("/search", response_model=VoiceSearchResponse)
async def voice_search(
    request: VoiceSearchRequest,
    search_service: VoiceSearchService = Depends(get_voice_search_service),
    analytics: AnalyticsService | None = Depends(get_analytics_service),
):
    """
    Search the catalog from a voice transcript and build the spoken reply.

    📝 **Example:**
        ```json
        {"transcript": "بغيت كريم مرطب للبشرة الجافة", "user_name": "Salma"}
        ```

    A blank transcript returns 400 with the "didn't hear you" reply; a catalog
    outage returns 503 with the apology reply. Zero matches is a normal 200.
    """
    if not request.transcript.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=CANNED_REPLIES["no_speech"])

    try:
        result = await search_service.search_by_voice(request.transcript)
    except CatalogUnavailable as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=CANNED_REPLIES["error"]) from e

    reply = generate_response(result.products, result.keywords, result.search_query, request.user_name)

    if analytics is not None:
        await analytics.log_query(request.transcript, result.keywords, len(result.products))

    return VoiceSearchResponse(
        transcript=request.transcript,
        search_query=result.search_query,
        description=get_search_description(result.keywords),
        keywords=result.keywords,
        products=result.products,
        total_results=len(result.products),
        reply=reply,
    )


@router.get("/insights", response_model=SearchInsights)
async def get_insights(
    limit: int = Query(default=100, ge=1, le=1000),
    service: AnalyticsService = Depends(require_analytics_service),
):
    """Most searched product types, skin types and concerns, plus recent and zero-result searches."""
    return await service.get_insights(limit=limit)


@router.delete("/insights")
async def clear_insights(
    limit: int = Query(default=50, ge=1, le=1000),
    service: AnalyticsService = Depends(require_analytics_service),
):
    """Delete the most recent search logs."""
    deleted = await service.clear(limit=limit)
    return {"message": "Search logs cleared", "deleted": deleted}
