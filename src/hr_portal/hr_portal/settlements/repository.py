from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Clearance, Settlement, SettlementComponents, SettlementTotals


class SettlementRepository(Protocol):
    def get_completed_clearance(self, employee_id: str) -> Optional[Clearance]:
        """Clearances are maintained by the exit workflow; only completed ones qualify."""

        raise NotImplementedError

    def create_settlement(
        self,
        *,
        employee_id: str,
        employee_name: str,
        employee_code: str,
        components: SettlementComponents,
        totals: SettlementTotals,
        remarks: Optional[str],
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def list_settlements(self, *, limit: int = 200) -> Sequence[Settlement]:
        raise NotImplementedError
