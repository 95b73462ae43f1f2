"""Admin reports router: JSON reports and Excel downloads."""

import logging
from io import BytesIO
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from shopfront.application.queries import ReportQuery
from shopfront.domain.reporting import Report, ReportType
from shopfront.domain.shared import ErrorCode, ValidationError, utc_now
from shopfront.infrastructure.export import ExcelReportGenerator
from shopfront.presentation.api.dependencies import (
    AdminPrincipal,
    RepoFactory,
    SettingsDep,
    require_ready,
)
from shopfront.presentation.api.schemas.reports import (
    OverviewReportResponse,
    ProductsReportResponse,
    ReportResponse,
    SalesReportResponse,
    UsersReportResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_ready)])

DEFAULT_REPORT_DAYS = 7

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_RESPONSE_MODELS: dict[ReportType, type[BaseModel]] = {
    ReportType.OVERVIEW: OverviewReportResponse,
    ReportType.SALES: SalesReportResponse,
    ReportType.PRODUCTS: ProductsReportResponse,
    ReportType.USERS: UsersReportResponse,
}

ReportTypeParam = Annotated[
    str,
    Path(description="Report type: overview, sales, products or users"),
]
DaysParam = Annotated[
    int,
    Query(ge=0, le=3650, description="Trailing window in days"),
]


def _parse_report_type(value: str) -> ReportType:
    try:
        return ReportType(value.lower())
    except ValueError:
        msg = (
            f"Invalid report type: {value}. "
            f"Must be one of: {', '.join(t.value for t in ReportType)}"
        )
        raise ValidationError(msg, code=ErrorCode.INVALID_REPORT_TYPE) from None


async def _build_report(
    factory: RepoFactory,
    report_type: ReportType,
    days: int,
    timezone: str,
) -> Report:
    query = ReportQuery.from_factory(factory, timezone=timezone)
    return await query.execute(report_type, days=days)


@router.get(
    "/{report_type}",
    summary="Compute an admin report",
    responses={
        200: {"description": "Report for the trailing window"},
        400: {"description": "Unknown report type or invalid window"},
        403: {"description": "Admin access required"},
    },
)
async def get_report(
    report_type: ReportTypeParam,
    admin: AdminPrincipal,
    factory: RepoFactory,
    settings: SettingsDep,
    days: DaysParam = DEFAULT_REPORT_DAYS,
) -> ReportResponse:
    kind = _parse_report_type(report_type)
    report = await _build_report(factory, kind, days, settings.report_timezone)

    logger.info("Admin %s requested %s report (days=%d)", admin.email, kind.value, days)
    return ReportResponse(
        type=kind.value,
        days=days,
        data=_RESPONSE_MODELS[kind].model_validate(report),
    )


@router.get(
    "/{report_type}/export",
    summary="Download an admin report as Excel",
    response_class=StreamingResponse,
    responses={
        200: {
            "description": "Excel file download",
            "content": {XLSX_MEDIA_TYPE: {}},
        },
        400: {"description": "Unknown report type or invalid window"},
        403: {"description": "Admin access required"},
    },
)
async def export_report(
    report_type: ReportTypeParam,
    admin: AdminPrincipal,
    factory: RepoFactory,
    settings: SettingsDep,
    days: DaysParam = DEFAULT_REPORT_DAYS,
) -> StreamingResponse:
    kind = _parse_report_type(report_type)
    report = await _build_report(factory, kind, days, settings.report_timezone)

    generated_at = utc_now()
    excel_bytes = ExcelReportGenerator().generate(
        report_type=kind,
        report=report,
        days=days,
        generated_at=generated_at,
    )
    filename = ExcelReportGenerator.filename(kind, generated_at)

    logger.info("Excel %s report exported by %s", kind.value, admin.email)
    return StreamingResponse(
        BytesIO(excel_bytes),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
