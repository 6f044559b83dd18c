from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apartment.database import get_session
from apartment.schemas.interior import (
    InteriorCombinationListOut,
    InteriorPatternListOut,
    InteriorTypeListOut,
)
from apartment.viewmodels.interior_vm import InteriorCatalogViewModel

router = APIRouter(prefix="/api", tags=["interiors"])


@router.get("/interior-types", response_model=InteriorTypeListOut)
async def list_interior_types(session: AsyncSession = Depends(get_session)):
    vm = await InteriorCatalogViewModel.load_types(session)
    return InteriorTypeListOut(types=vm.types)


@router.get("/interior-patterns", response_model=InteriorPatternListOut)
async def list_interior_patterns(session: AsyncSession = Depends(get_session)):
    vm = await InteriorCatalogViewModel.load_patterns(session)
    return InteriorPatternListOut(patterns=vm.patterns)


@router.get("/interior-combinations", response_model=InteriorCombinationListOut)
async def list_interior_combinations(session: AsyncSession = Depends(get_session)):
    vm = await InteriorCatalogViewModel.load_combinations(session)
    return InteriorCombinationListOut.model_validate({"combinations": vm.combinations})
