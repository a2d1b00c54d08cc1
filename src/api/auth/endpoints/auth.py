from fastapi import APIRouter, Depends, Request
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool
from src.api.auth.services.auth_service import AuthService
from src.api.common.constants.routes import LOGIN_PATH
from src.api.common.utils.database import get_db

router = APIRouter(tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)):
    return AuthService(db)


@router.post(LOGIN_PATH)
async def login(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Sign in with email and password; redirects to the dashboard on success"""
    form_data = await request.form()
    message = await run_in_threadpool(auth_service.authenticate, None, form_data)
    return {"message": message}
