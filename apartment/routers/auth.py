from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apartment.database import get_session
from apartment.schemas.auth import AdminLoginOut, LoginOut, LoginRequest
from apartment.viewmodels.auth_vm import LoginViewModel

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginOut)
async def login(data: LoginRequest, session: AsyncSession = Depends(get_session)):
    vm = await LoginViewModel.login(session, data.login_id)
    return LoginOut(
        success=vm.success,
        room_number=vm.room_number,
        room_name=vm.room_name,
        message=vm.message,
    )


@router.post("/admin-login", response_model=AdminLoginOut)
async def admin_login(data: LoginRequest, session: AsyncSession = Depends(get_session)):
    vm = await LoginViewModel.admin_login(session, data.login_id)
    return AdminLoginOut(success=vm.success, message=vm.message)
