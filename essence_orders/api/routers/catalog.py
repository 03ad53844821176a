from fastapi import APIRouter

from essence_orders.domain.order_status import GENDERS, PERFUME_CATEGORIES, OrderStatus
from essence_orders.domain.schemas import EnumsOut

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/enums", response_model=EnumsOut)
def list_enums():
    return EnumsOut(
        perfume_categories=PERFUME_CATEGORIES,
        genders=GENDERS,
        order_statuses=OrderStatus.values(),
    )
