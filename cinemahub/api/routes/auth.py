"""Authentication routes"""

from fastapi import APIRouter, Depends, status

from ...api.dependencies import get_unit_of_work, get_email_service
from ...application.use_cases.register_user import RegisterUserUseCase
from ...application.use_cases.verify_otp_use_case import VerifyOtpUseCase
from ...application.use_cases.resend_otp_use_case import ResendOtpUseCase
from ...application.use_cases.login_user import LoginUserUseCase
from ...application.use_cases.forgot_password_use_case import ForgotPasswordUseCase
from ...application.use_cases.reset_password_use_case import ResetPasswordUseCase
from ...application.use_cases.google_oauth_use_case import GoogleOAuthUseCase
from ...application.dtos.user_dtos import (
    ApiResponse,
    AuthResultDto,
    EmailOnlyDto,
    GoogleAuthDto,
    GoogleStatusDto,
    LoginUserDto,
    RegisterUserDto,
    ResetPasswordDto,
    UserSummaryDto,
    VerifyOtpDto,
)
from ...core.config import settings
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService

router = APIRouter()


@router.post(
    "/register",
    response_model=ApiResponse[UserSummaryDto],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED
)
async def register_user(
    user_data: RegisterUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service)
):
    """Register a new user"""
    use_case = RegisterUserUseCase(unit_of_work, email_service)
    user = await use_case.execute(user_data)
    return ApiResponse[UserSummaryDto](
        message="User registered successfully. Please check your email for verification.",
        data=user
    )


@router.post("/verify-otp", response_model=ApiResponse[AuthResultDto], response_model_exclude_none=True)
async def verify_otp(
    request: VerifyOtpDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Verify email with OTP"""
    use_case = VerifyOtpUseCase(unit_of_work)
    result = await use_case.execute(request)
    return ApiResponse[AuthResultDto](message="Email verified successfully", data=result)


@router.post("/resend-otp", response_model=ApiResponse[None])
async def resend_otp(
    request: EmailOnlyDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service)
):
    """Resend OTP to user's email"""
    use_case = ResendOtpUseCase(unit_of_work, email_service)
    await use_case.execute(request)
    return ApiResponse[None](message="New OTP sent successfully")


@router.post("/login", response_model=ApiResponse[AuthResultDto], response_model_exclude_none=True)
async def login_user(
    login_data: LoginUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Login user"""
    use_case = LoginUserUseCase(unit_of_work)
    result = await use_case.execute(login_data)
    return ApiResponse[AuthResultDto](message="Login successful", data=result)


@router.post("/forgot-password", response_model=ApiResponse[None])
async def forgot_password(
    request: EmailOnlyDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service)
):
    """Handle forgot password request"""
    use_case = ForgotPasswordUseCase(unit_of_work, email_service)
    await use_case.execute(request)
    return ApiResponse[None](message="Password reset email sent successfully")


@router.post("/reset-password", response_model=ApiResponse[None])
async def reset_password(
    request: ResetPasswordDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Reset password with token"""
    use_case = ResetPasswordUseCase(unit_of_work)
    await use_case.execute(request)
    return ApiResponse[None](message="Password reset successfully")


@router.post("/google", response_model=ApiResponse[AuthResultDto], response_model_exclude_none=True)
async def google_oauth(
    request: GoogleAuthDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Google OAuth authentication"""
    use_case = GoogleOAuthUseCase(unit_of_work)
    result = await use_case.execute(request)
    return ApiResponse[AuthResultDto](message="Google authentication successful", data=result)


@router.get("/google/status", response_model=ApiResponse[GoogleStatusDto])
async def google_oauth_status():
    """Check if Google OAuth is configured"""
    configured = settings.google_configured
    return ApiResponse[GoogleStatusDto](
        data=GoogleStatusDto(
            is_configured=configured,
            client_id=settings.GOOGLE_CLIENT_ID if configured else None
        )
    )
