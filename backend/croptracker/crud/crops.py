# backend/croptracker/crud/crops.py

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.crop import Crop
from ..schemas.crop import CropCreate, CropFilter


def crop_conditions(user_id: str, filters: CropFilter) -> list:
    """
    Selection predicate for the crop listing. The date range applies to
    the crop's own planting date only.
    """
    conditions = [Crop.user_id == user_id]
    if filters.crop_id:
        conditions.append(Crop.id == filters.crop_id)
    if filters.from_date:
        conditions.append(Crop.date >= filters.from_date)
    if filters.to_date:
        conditions.append(Crop.date <= filters.to_date)
    return conditions


async def count_crops(user_id: str, filters: CropFilter, db: AsyncSession) -> int:
    total = await db.scalar(
        select(func.count()).select_from(Crop).where(*crop_conditions(user_id, filters))
    )
    return total or 0


async def list_crop_page(
    user_id: str, filters: CropFilter, page_size: int, db: AsyncSession
) -> List[Crop]:
    rows = await db.scalars(
        select(Crop)
        .where(*crop_conditions(user_id, filters))
        .order_by(Crop.created_at, Crop.id)
        .offset((filters.page_number - 1) * page_size)
        .limit(page_size)
    )
    return rows.all()


async def create_crop(user_id: str, payload: CropCreate, db: AsyncSession) -> Crop:
    crop = Crop(
        user_id=user_id,
        name=payload.name,
        acres=payload.acres,
        date=payload.date,
    )
    db.add(crop)
    await db.commit()
    await db.refresh(crop)
    return crop


async def get_owned_crop(crop_id: str, user_id: str, db: AsyncSession) -> Optional[Crop]:
    return await db.scalar(
        select(Crop).where(Crop.id == crop_id, Crop.user_id == user_id)
    )


async def delete_crop(crop_id: str, user_id: str, db: AsyncSession) -> bool:
    crop = await get_owned_crop(crop_id, user_id, db)
    if not crop:
        return False

    # expenses and incomes go with it (relationship cascade)
    await db.delete(crop)
    await db.commit()
    return True
