"""
Financial Router - Presentation Layer

This module defines the FastAPI router for the admin financial analytics
endpoints: revenue statistics, revenue forecast and financial reports.
Every route requires the admin role.
"""

from typing import NoReturn, Optional, Union

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status
from fastapi.responses import Response

from src.application.dtos.forecast_dto import ForecastRequestDTO, ForecastResponseDTO
from src.application.dtos.report_dto import (
    CustomReportDTO,
    CustomReportRequestDTO,
    DetailedReportDTO,
    ExportFileDTO,
    SummaryReportDTO,
)
from src.application.dtos.revenue_dto import RevenueStatisticsDTO
from src.application.use_cases.forecast_use_cases import (
    GenerateRevenueForecastUseCase,
)
from src.application.use_cases.report_use_cases import (
    GenerateCustomReportUseCase,
    GetFinancialReportUseCase,
)
from src.application.use_cases.revenue_use_cases import GetRevenueStatisticsUseCase
from src.domain.entities.analytics import Granularity
from src.domain.entities.auth import Principal
from src.domain.entities.errors import (
    DomainError,
    ForbiddenError,
    InvalidDateRangeError,
    OrderDataSourceError,
    UnauthorizedError,
)
from src.domain.entities.report import ReportType
from src.domain.ports.access_control import IAccessControl
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/financial", tags=["Financial"])

_STATUS_BY_ERROR = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    InvalidDateRangeError: status.HTTP_400_BAD_REQUEST,
    OrderDataSourceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_detail(code: str, message: str) -> dict:
    return {"code": code, "message": message}


def raise_domain_error(error: DomainError) -> NoReturn:
    """Translate a domain error into the matching HTTP error response."""
    status_code = _STATUS_BY_ERROR.get(
        type(error), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    raise HTTPException(
        status_code=status_code, detail=error_detail(error.code, error.message)
    ) from error


def raise_internal_error(event: str, error: Exception, **context) -> NoReturn:
    logger.error(event, error=str(error), exc_info=error, **context)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_detail("internal_error", "Internal server error"),
    ) from error


def extract_token(request: Request) -> Optional[str]:
    """Bearer token from the Authorization header, else the ``token`` cookie."""
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get("token")


@inject
def require_admin(
    request: Request,
    access_control: IAccessControl = Depends(Provide["access_control"]),
    admin_role: str = Depends(Provide["config.auth.admin_role"]),
) -> Principal:
    """Dependency guarding the financial routes."""
    try:
        return access_control.require_role(extract_token(request), admin_role)
    except DomainError as e:
        raise_domain_error(e)


@router.get("/revenue", response_model=RevenueStatisticsDTO)
@inject
async def get_revenue_statistics(
    period: Granularity = Query(
        Granularity.MONTH, description="day, week, month, year or custom"
    ),
    start: Optional[str] = Query(
        None, description="ISO-8601 start of a custom period"
    ),
    end: Optional[str] = Query(None, description="ISO-8601 end of a custom period"),
    principal: Principal = Depends(require_admin),
    get_revenue_statistics_use_case: GetRevenueStatisticsUseCase = Depends(
        Provide["get_revenue_statistics_use_case"]
    ),
) -> RevenueStatisticsDTO:
    """
    Get revenue statistics for a period.

    Returns totals, status and product type breakdowns, the bucketed revenue
    series, the comparison with the previous period and the top products.
    """
    try:
        return await get_revenue_statistics_use_case.execute(period, start, end)
    except DomainError as e:
        raise_domain_error(e)
    except Exception as e:
        raise_internal_error(
            "financial.revenue.failed",
            e,
            period=period.value,
            user_id=principal.user_id,
        )


@router.post("/forecast", response_model=ForecastResponseDTO)
@inject
async def generate_forecast(
    forecast_request: Optional[ForecastRequestDTO] = Body(None),
    principal: Principal = Depends(require_admin),
    generate_revenue_forecast_use_case: GenerateRevenueForecastUseCase = Depends(
        Provide["generate_revenue_forecast_use_case"]
    ),
) -> ForecastResponseDTO:
    """
    Project monthly revenue forward with compounding growth.

    Seasonal factors scale the projected month they are keyed by without
    compounding into later months.
    """
    forecast_request = forecast_request or ForecastRequestDTO()
    try:
        return await generate_revenue_forecast_use_case.execute(forecast_request)
    except DomainError as e:
        raise_domain_error(e)
    except Exception as e:
        raise_internal_error(
            "financial.forecast.failed", e, user_id=principal.user_id
        )


@router.get(
    "/reports",
    response_model=Union[DetailedReportDTO, SummaryReportDTO],
    responses={200: {"content": {"text/csv": {}}}},
)
@inject
async def get_financial_report(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    report_type: ReportType = Query(ReportType.SUMMARY, alias="type"),
    principal: Principal = Depends(require_admin),
    get_financial_report_use_case: GetFinancialReportUseCase = Depends(
        Provide["get_financial_report_use_case"]
    ),
):
    """
    Generate a summary or detailed report, or download the orders as CSV.
    """
    try:
        report = await get_financial_report_use_case.execute(
            report_type, start_date, end_date
        )
    except DomainError as e:
        raise_domain_error(e)
    except Exception as e:
        raise_internal_error(
            "financial.report.failed",
            e,
            report_type=report_type.value,
            user_id=principal.user_id,
        )

    if isinstance(report, ExportFileDTO):
        return Response(
            content=report.content,
            media_type=report.media_type,
            headers={
                "Content-Disposition": f'attachment; filename="{report.filename}"'
            },
        )
    return report


@router.post(
    "/reports", response_model=CustomReportDTO, response_model_exclude_none=True
)
@inject
async def generate_custom_report(
    report_request: Optional[CustomReportRequestDTO] = Body(None),
    principal: Principal = Depends(require_admin),
    generate_custom_report_use_case: GenerateCustomReportUseCase = Depends(
        Provide["generate_custom_report_use_case"]
    ),
) -> CustomReportDTO:
    """Generate a filtered summary, monthly or product report."""
    report_request = report_request or CustomReportRequestDTO()
    try:
        return await generate_custom_report_use_case.execute(report_request)
    except DomainError as e:
        raise_domain_error(e)
    except Exception as e:
        raise_internal_error(
            "financial.custom_report.failed",
            e,
            report_type=report_request.report_type.value,
            user_id=principal.user_id,
        )
