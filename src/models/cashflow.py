import math
from dataclasses import dataclass, field
from enum import IntEnum


class ResultStatus(IntEnum):
    OK = 0
    FAILED = 1  # NaN rate or internal failure


@dataclass(frozen=True)
class CashFlowSeries:
    """Per-period spending and income, index 0 = today."""
    spending: tuple[float, ...]
    income: tuple[float, ...]

    def __post_init__(self):
        # Accept any sequence, store tuples
        object.__setattr__(self, "spending", tuple(float(x) for x in self.spending))
        object.__setattr__(self, "income", tuple(float(x) for x in self.income))
        if len(self.spending) != len(self.income):
            raise ValueError("Number of income and outcome is not equal.")
        if len(self.spending) < 2:
            raise ValueError("Number of income and outcome is less than 2.")
        if not all(math.isfinite(x) for x in self.spending + self.income):
            raise ValueError("Spending and income must be finite numbers.")

    @property
    def periods(self) -> int:
        return len(self.spending)

    @property
    def degree(self) -> int:
        return self.periods - 1

    def differences(self) -> list[float]:
        """Net cash flow per period (income - spending); coefficient of x**i."""
        return [inc - sp for sp, inc in zip(self.spending, self.income)]


@dataclass
class IRRResult:
    status: ResultStatus = ResultStatus.OK
    irr: float = math.nan  # Percentage, e.g. 10.0 = 10%
    error: str = ""
    # Roots were found but none gave a rate; other failures are internal
    undefined_rate: bool = False

    # Diagnostics
    roots: list[float] = field(default_factory=list)
    discount_factor: float = 0.0
    npv_residual: float = math.nan  # NPV of the net flows at the IRR

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.OK
