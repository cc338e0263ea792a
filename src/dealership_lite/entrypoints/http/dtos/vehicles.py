from pydantic import BaseModel

from dealership_lite.entrypoints.http.dtos.financing import LoanQuoteResponseDTO


class VehicleResponseDTO(BaseModel):
    id: str
    make: str
    model: str
    year: int
    price: str
    category: str | None = None


class VehiclesResponseDTO(BaseModel):
    vehicles: list[VehicleResponseDTO]
    total: int


class VehicleQuoteResponseDTO(BaseModel):
    vehicle: VehicleResponseDTO
    quote: LoanQuoteResponseDTO
