from __future__ import annotations

from typing import Protocol

from returns.result import Result

from theater_billing.core.domain.model.errors import StatementError
from theater_billing.core.domain.model.theater import Invoice, StatementResult


class ComputeStatementUseCase(Protocol):
    def compute(self, invoice: Invoice) -> Result[StatementResult, StatementError]: ...
