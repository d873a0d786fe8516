from fastapi import APIRouter, Depends
from app.api.deps import get_store
from app.schemas.promotion import PromotionStatsResponse
from app.services.insights import build_dashboard_summary
from app.services.promotion_store import PromotionStore

router = APIRouter(prefix="/api/admin/stats", tags=["admin-stats"])


@router.get("/", response_model=PromotionStatsResponse)
def get_stats(store: PromotionStore = Depends(get_store)):
    """Статистика для дашборда"""
    return build_dashboard_summary(store.load_all())
