"""Player contracts, league contract limits and team cap settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ContractType(Enum):
    """Kind of contract a player can sign."""

    ENTRY_LEVEL = "ENTRY_LEVEL"
    STANDARD = "STANDARD"
    BRIDGE = "BRIDGE"
    EXTENSION = "EXTENSION"
    TWO_WAY = "TWO_WAY"
    ONE_WAY = "ONE_WAY"
    PROFESSIONAL_TRYOUT = "PROFESSIONAL_TRYOUT"


def _fmt(value: float | int) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _check_range(field_name: str, value: float, low: float, high: float) -> None:
    if value < low or value > high:
        raise ValueError(
            f"{field_name} out of range: {_fmt(value)} not in [{_fmt(low)}, {_fmt(high)}]"
        )


@dataclass
class Contract:
    """A single player contract."""

    contract_type: ContractType
    years: int
    cap_hit_millions: float
    salary_millions: float
    signing_bonus_millions: float
    performance_bonus_millions: float
    no_trade_clauses: int
    no_move_clauses: int

    def validate(self, limits: ContractLimits) -> None:
        """Raise ValueError if this contract breaks any of ``limits``."""
        limits.validate(self)


@dataclass
class ContractLimits:
    """Inclusive bounds that every contract term must respect."""

    min_years: int
    max_years: int
    min_cap_hit_millions: float
    max_cap_hit_millions: float
    min_salary_millions: float
    max_salary_millions: float
    min_signing_bonus_millions: float
    max_signing_bonus_millions: float
    min_performance_bonus_millions: float
    max_performance_bonus_millions: float
    min_no_trade_clauses: int
    max_no_trade_clauses: int
    min_no_move_clauses: int
    max_no_move_clauses: int

    @classmethod
    def nhl_default(cls) -> ContractLimits:
        """Limits modelled on a typical professional league."""
        return cls(1, 8, 0.775, 18.0, 0.775, 16.0, 0.0, 15.0, 0.0, 5.0, 0, 1, 0, 1)

    def validate(self, contract: Contract) -> None:
        """Raise ValueError naming the first contract term out of bounds."""
        checks = (
            ("years", contract.years, self.min_years, self.max_years),
            ("cap_hit_millions", contract.cap_hit_millions,
             self.min_cap_hit_millions, self.max_cap_hit_millions),
            ("salary_millions", contract.salary_millions,
             self.min_salary_millions, self.max_salary_millions),
            ("signing_bonus_millions", contract.signing_bonus_millions,
             self.min_signing_bonus_millions, self.max_signing_bonus_millions),
            ("performance_bonus_millions", contract.performance_bonus_millions,
             self.min_performance_bonus_millions, self.max_performance_bonus_millions),
            ("no_trade_clauses", contract.no_trade_clauses,
             self.min_no_trade_clauses, self.max_no_trade_clauses),
            ("no_move_clauses", contract.no_move_clauses,
             self.min_no_move_clauses, self.max_no_move_clauses),
        )
        for name, value, low, high in checks:
            _check_range(name, value, low, high)


@dataclass
class TeamContractSettings:
    """Team-wide salary cap rules."""

    salary_cap_max_millions: float
    salary_floor_min_millions: float
    max_contracts: int
    max_retained_salary_slots: int
    limits: ContractLimits = field(default_factory=ContractLimits.nhl_default)

    @classmethod
    def nhl_default(cls) -> TeamContractSettings:
        """Cap settings modelled on a typical professional league."""
        return cls(88.0, 65.0, 50, 3, ContractLimits.nhl_default())