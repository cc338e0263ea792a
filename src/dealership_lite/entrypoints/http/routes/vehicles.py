from fastapi import APIRouter, Body, Depends

from dealership_lite.entrypoints.http.dependencies import (
    get_list_vehicles_use_case,
    get_quote_vehicle_loan_use_case,
    get_vehicle_by_id_use_case,
)
from dealership_lite.entrypoints.http.dtos.financing import VehicleQuoteRequestDTO
from dealership_lite.entrypoints.http.error_responses import ErrorResponse
from dealership_lite.entrypoints.http.dtos.vehicles import (
    VehicleQuoteResponseDTO,
    VehicleResponseDTO,
    VehiclesResponseDTO,
)
from dealership_lite.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from dealership_lite.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from dealership_lite.use_cases.list_vehicles import ListVehicles
from dealership_lite.use_cases.quote_vehicle_loan import QuoteVehicleLoan


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=VehiclesResponseDTO,
    summary="List vehicles available for financing",
)
def list_vehicles(
    use_case: ListVehicles = Depends(get_list_vehicles_use_case),
) -> VehiclesResponseDTO:
    result = use_case.execute()

    return VehicleMapper.to_vehicles_response(result.vehicles)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle details",
    responses={
        404: {"model": ErrorResponse, "description": "Vehicle not found"},
        422: {"model": ErrorResponse, "description": "Invalid vehicle ID"},
    },
)
def get_vehicle(
    vehicle_id: str,
    use_case: GetVehicleById = Depends(get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))

    return VehicleMapper.to_vehicle_response(result.vehicle)


@router.post(
    "/vehicles/{vehicle_id}/financing-quote",
    response_model=VehicleQuoteResponseDTO,
    summary="Quote a loan for a catalog vehicle",
    responses={
        404: {"model": ErrorResponse, "description": "Vehicle not found"},
        422: {"model": ErrorResponse, "description": "Invalid loan parameters"},
    },
    description="""
    Prefills the calculator from the vehicle: principal is the vehicle price
    and the down payment defaults to 20% of it. Term (5 years) and rate
    (8.5%) defaults apply unless overridden in the body. The body is optional.
    """,
)
def quote_vehicle_loan(
    vehicle_id: str,
    payload: VehicleQuoteRequestDTO | None = Body(default=None),
    use_case: QuoteVehicleLoan = Depends(get_quote_vehicle_loan_use_case),
) -> VehicleQuoteResponseDTO:
    request = VehicleMapper.to_quote_request(vehicle_id, payload)

    result = use_case.execute(request)

    return VehicleMapper.to_quote_response(result)
