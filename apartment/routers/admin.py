from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apartment.database import get_session
from apartment.schemas.base import MessageOut
from apartment.schemas.interior import (
    InteriorPatternCreate,
    InteriorPatternResult,
    InteriorPatternUpdate,
    InteriorTypeCreate,
    InteriorTypeResult,
    InteriorTypeUpdate,
)
from apartment.viewmodels.interior_vm import InteriorAdmin

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/interior-types", response_model=InteriorTypeResult)
async def create_interior_type(data: InteriorTypeCreate, session: AsyncSession = Depends(get_session)):
    itype = await InteriorAdmin.create_type(session, data)
    return InteriorTypeResult.model_validate({"type": itype})


@router.put("/interior-types/{type_id}", response_model=InteriorTypeResult)
async def update_interior_type(
    type_id: int, data: InteriorTypeUpdate, session: AsyncSession = Depends(get_session)
):
    itype = await InteriorAdmin.update_type(session, type_id, data)
    return InteriorTypeResult.model_validate({"type": itype})


@router.delete("/interior-types/{type_id}", response_model=MessageOut)
async def delete_interior_type(type_id: int, session: AsyncSession = Depends(get_session)):
    await InteriorAdmin.delete_type(session, type_id)
    return MessageOut(message="Interior type deleted")


@router.post("/interior-patterns", response_model=InteriorPatternResult)
async def create_interior_pattern(data: InteriorPatternCreate, session: AsyncSession = Depends(get_session)):
    pattern = await InteriorAdmin.create_pattern(session, data)
    return InteriorPatternResult.model_validate({"pattern": pattern})


@router.put("/interior-patterns/{pattern_id}", response_model=InteriorPatternResult)
async def update_interior_pattern(
    pattern_id: int, data: InteriorPatternUpdate, session: AsyncSession = Depends(get_session)
):
    pattern = await InteriorAdmin.update_pattern(session, pattern_id, data)
    return InteriorPatternResult.model_validate({"pattern": pattern})


@router.delete("/interior-patterns/{pattern_id}", response_model=MessageOut)
async def delete_interior_pattern(pattern_id: int, session: AsyncSession = Depends(get_session)):
    await InteriorAdmin.delete_pattern(session, pattern_id)
    return MessageOut(message="Interior pattern deleted")
