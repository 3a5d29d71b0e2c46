# backend/croptracker/api/crops.py

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.auth import CurrentUser, get_current_user
from ..core.database import get_db
from ..core.logger import logger
from ..crud import crops as crud_crops
from ..schemas.common import Message
from ..schemas.crop import CropCreate, CropFilter, CropPage
from ..services.crop_summary_service import list_crop_summaries

router = APIRouter(prefix="/api/crops", tags=["Crops"])


@router.get(
    "",
    response_model=CropPage,
    summary="Get crops with expense, income and profit details",
)
async def list_crops(
    from_date: Optional[datetime.date] = Query(
        None, alias="fromDate", description="Crops planted on or after this date"
    ),
    to_date: Optional[datetime.date] = Query(
        None, alias="toDate", description="Crops planted on or before this date"
    ),
    crop_id: Optional[str] = Query(None, alias="cropId", description="Only this crop"),
    page_number: int = Query(1, alias="pageNumber", ge=1),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    filters = CropFilter(
        from_date=from_date,
        to_date=to_date,
        crop_id=crop_id,
        page_number=page_number,
    )
    return await list_crop_summaries(user.id, filters, db)


@router.post(
    "",
    response_model=Message,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new crop",
)
async def create_crop(
    payload: CropCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    crop = await crud_crops.create_crop(user.id, payload, db)
    logger.info(f"Crop {crop.id} added", extra={"user_id": user.id})
    return {"message": "crop added"}


@router.delete("/{crop_id}", response_model=Message, summary="Delete a crop by ID")
async def delete_crop(
    crop_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    deleted = await crud_crops.delete_crop(crop_id, user.id, db)
    if not deleted:
        raise HTTPException(status_code=404, detail="Crop not found")

    logger.info(f"Crop {crop_id} deleted", extra={"user_id": user.id})
    return {"message": "crop deleted"}
