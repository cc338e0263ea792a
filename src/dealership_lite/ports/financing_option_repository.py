from __future__ import annotations

from abc import ABC, abstractmethod

from dealership_lite.domain.financing_option import FinancingOption


class FinancingOptionRepository(ABC):
    @abstractmethod
    def list_options(self) -> list[FinancingOption]: ...

    @abstractmethod
    def get_by_id(self, option_id: str) -> FinancingOption | None: ...
