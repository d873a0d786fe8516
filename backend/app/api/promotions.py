import asyncio
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.concurrency import run_in_threadpool
from typing import List, Optional
from app.api.deps import get_store
from app.core.config import settings
from app.models.promotion import ApplyToType
from app.schemas.promotion import (
    PromotionCreate, PromotionUpdate, PromotionResponse, PromotionDetailResponse, PromotionBase
)
from app.services.insights import build_promotion_detail
from app.services.promotion_store import PromotionStore
from app.services.validation import FORM_ERROR_MESSAGE, validate_promotion

router = APIRouter(prefix="/api/promotions", tags=["promotions"])


def ensure_valid(data: PromotionBase, check_dates: bool) -> None:
    errors = validate_promotion(data, check_dates=check_dates)
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": FORM_ERROR_MESSAGE, "errors": errors}
        )


async def simulate_latency() -> None:
    """Имитация задержки сети"""
    if settings.simulated_latency_seconds:
        await asyncio.sleep(settings.simulated_latency_seconds)


@router.get("/", response_model=List[PromotionResponse])
def list_promotions(
    apply_to: Optional[ApplyToType] = Query(None),
    is_active: Optional[bool] = Query(None),
    q: Optional[str] = Query(None, description="Search by name"),
    store: PromotionStore = Depends(get_store)
):
    """Список всех акций в порядке создания"""
    promotions = store.load_all()
    
    if apply_to:
        promotions = [p for p in promotions if p.get("apply_to") == apply_to.value]
    if is_active is not None:
        promotions = [p for p in promotions if bool(p.get("is_active")) == is_active]
    if q:
        search = q.strip().lower()
        promotions = [p for p in promotions if search in (p.get("name") or "").lower()]
    
    return promotions


@router.get("/{promotion_id}", response_model=PromotionDetailResponse)
def get_promotion(promotion_id: str, store: PromotionStore = Depends(get_store)):
    """Акция по ID с прогрессом и сроками"""
    promo = store.find_by_id(promotion_id)
    if not promo:
        raise HTTPException(status_code=404, detail="Promotion not found")
    return build_promotion_detail(promo)


@router.post("/", response_model=PromotionResponse, status_code=status.HTTP_201_CREATED)
async def create_promotion(data: PromotionCreate, store: PromotionStore = Depends(get_store)):
    """Создать акцию"""
    ensure_valid(data, check_dates=True)
    
    # I/O хранилища синхронный, выносим из event loop
    promo = await run_in_threadpool(store.save, data.to_record())
    await simulate_latency()
    return promo


@router.put("/{promotion_id}", response_model=PromotionResponse)
async def update_promotion(
    promotion_id: str,
    data: PromotionUpdate,
    store: PromotionStore = Depends(get_store)
):
    """Сохранить отредактированную акцию"""
    if not await run_in_threadpool(store.find_by_id, promotion_id):
        raise HTTPException(status_code=404, detail="Promotion not found")
    
    # Даты при редактировании не проверяем
    ensure_valid(data, check_dates=False)
    
    await run_in_threadpool(store.update, {**data.to_record(), "id": promotion_id})
    await simulate_latency()
    return await run_in_threadpool(store.find_by_id, promotion_id)


@router.delete("/{promotion_id}")
def delete_promotion(promotion_id: str, store: PromotionStore = Depends(get_store)):
    """Удалить акцию (неизвестный ID не ошибка)"""
    store.remove(promotion_id)
    return {"message": "Promotion deleted"}
