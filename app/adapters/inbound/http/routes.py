"""HTTP routes."""

from typing import Union
from uuid import uuid4

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from app.application.dtos.financing import (
    CalculationRequest,
    CalculatorOptions,
    ComparisonResult,
    ErrorResponse,
)
from app.domain.errors import FinancingValidationError, InternalComputationError
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import (
    log_comparison,
    log_event,
    log_internal_failure,
    log_validation_failure,
)
from app.infrastructure.wiring.dependencies import create_compare_financing_options_use_case

router = APIRouter()

# Create use case instance (stateless, shared by all requests)
_compare_financing_options = create_compare_financing_options_use_case()

REQUEST_ID_HEADER = "X-Request-ID"


@router.get("/health", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
async def health_check() -> str:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Plain text 'ok'
    """
    return "ok"


@router.get(
    "/api/calculator/options",
    status_code=status.HTTP_200_OK,
    response_model=CalculatorOptions,
)
async def calculator_options() -> CalculatorOptions:
    """
    Get the principal bounds, terms and defaults of the calculator form.

    Returns:
        Calculator form parameters
    """
    return _compare_financing_options.calculator_options()


@router.post(
    "/api/calculate",
    status_code=status.HTTP_200_OK,
    response_model=ComparisonResult,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def calculate(
    request: CalculationRequest, response: Response
) -> Union[ComparisonResult, JSONResponse]:
    """
    Compare the flat-rate plan against a bank loan.

    Args:
        request: Principal and term in months
        response: Outgoing response (carries the request id header)

    Returns:
        Comparison result, or an error payload with status 400 or 500
    """
    # Generate request_id for log correlation
    request_id = str(uuid4())
    headers = {REQUEST_ID_HEADER: request_id}

    log_event(
        request_id=request_id,
        component="http",
        principal=request.principal,
        term_months=request.term_months,
    )

    try:
        result = _compare_financing_options.compare(request.principal, request.term_months)
    except FinancingValidationError as err:
        log_validation_failure(request_id, err.code, message=err.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=err.message, code=err.code).model_dump(),
            headers=headers,
        )
    except InternalComputationError as err:
        log_internal_failure(
            request_id,
            err,
            principal=request.principal,
            term_months=request.term_months,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=err.message, code=err.code).model_dump(),
            headers=headers,
        )

    log_comparison(
        request_id,
        result.principal,
        result.term_months,
        result.recommended_option.value,
        total_savings=result.total_savings,
    )

    # Add request inputs to debug if DEBUG_MODE is enabled
    if settings.debug_mode:
        result = result.model_copy(
            update={
                "debug": {
                    "request_id": request_id,
                    "principal": request.principal,
                    "term_months": request.term_months,
                }
            }
        )

    response.headers[REQUEST_ID_HEADER] = request_id
    return result
