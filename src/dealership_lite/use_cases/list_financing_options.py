from __future__ import annotations

from dataclasses import dataclass

from dealership_lite.domain.financing_option import FinancingOption
from dealership_lite.ports.financing_option_repository import FinancingOptionRepository


@dataclass(frozen=True, slots=True)
class ListFinancingOptionsResponse:
    options: list[FinancingOption]


class ListFinancingOptions:
    def __init__(self, financing_option_repository: FinancingOptionRepository) -> None:
        self._repository = financing_option_repository

    def execute(self) -> ListFinancingOptionsResponse:
        return ListFinancingOptionsResponse(options=self._repository.list_options())
