"""Rule-based allocation, instrument recommendations, action plan and key metrics.

Entry percentages are rounded one by one and are never rescaled, so a
portfolio can land a point or two either side of 100. `allocation_total`
reports the actual sum.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from app.modules.investor_profile.scoring import as_number, round_half_up

DEFAULT_INVESTABLE_AMOUNT = 50_000
DEFAULT_HORIZON_YEARS = 10
DEFAULT_STYLE = "passive"
EMERGENCY_FUND_TARGET_MONTHS = 6

INDIVIDUAL_STOCK_MIN_AMOUNT = 100_000
BOND_LADDER_MIN_AMOUNT = 250_000
STAGED_DEPLOYMENT_MIN_AMOUNT = 100_000


@dataclass(frozen=True)
class Subcategory:
    name: str
    percentage: int


@dataclass(frozen=True)
class AllocationEntry:
    category: str
    percentage: int
    color: str
    subcategories: tuple[Subcategory, ...] = ()


@dataclass(frozen=True)
class Recommendation:
    type: str
    ticker: str
    name: str
    category: str
    reason: str
    expense_ratio: str | None = None
    allocation: int | None = None


@dataclass(frozen=True)
class ActionPlanStep:
    priority: int
    title: str
    description: str
    timeframe: str


@dataclass(frozen=True)
class KeyMetrics:
    expected_return: float
    volatility: float
    max_drawdown: float
    sharpe_ratio: float
    time_horizon: str
    expected_return_display: str
    volatility_display: str
    max_drawdown_display: str
    sharpe_ratio_display: str


def _subs(*pairs: tuple[str, int]) -> tuple[Subcategory, ...]:
    return tuple(Subcategory(name, pct) for name, pct in pairs)


US_EQUITY_SUBS = _subs(("Large Cap Growth", 35), ("Large Cap Value", 30), ("Mid Cap", 20), ("Small Cap", 15))
INTL_EQUITY_SUBS = _subs(("Developed Markets", 60), ("Emerging Markets", 40))
FIXED_INCOME_SUBS = _subs(
    ("Government Bonds", 40), ("Corporate Bonds", 35), ("Municipal Bonds", 15), ("TIPS", 10)
)
REAL_ESTATE_SUBS = _subs(("REITs", 60), ("Real Estate Funds", 40))
ALTERNATIVES_SUBS = _subs(("Commodities", 40), ("Gold", 30), ("Private Equity", 30))
DIGITAL_ASSET_SUBS = _subs(("Bitcoin", 60), ("Ethereum", 30), ("Other", 10))
CASH_SUBS = _subs(("Money Market", 60), ("Short-term Treasuries", 40))

CATEGORY_COLORS: dict[str, str] = {
    "US Equities": "#3b82f6",
    "International Equities": "#8b5cf6",
    "Fixed Income": "#10b981",
    "Real Estate": "#f59e0b",
    "Alternatives": "#ec4899",
    "Digital Assets": "#f97316",
    "Cash & Equivalents": "#6b7280",
}

CORE_ETFS: tuple[Recommendation, ...] = (
    Recommendation("ETF", "VTI", "Vanguard Total Stock Market", "US Equities",
                   "Broad US market exposure at minimal cost", "0.03%", 25),
    Recommendation("ETF", "VXUS", "Vanguard Total International", "International",
                   "Global diversification outside US", "0.07%", 15),
    Recommendation("ETF", "BND", "Vanguard Total Bond", "Fixed Income",
                   "Investment-grade bond stability", "0.03%", 20),
)
INDIVIDUAL_STOCKS: tuple[Recommendation, ...] = (
    Recommendation("Stock", "AAPL", "Apple Inc.", "Tech - Large Cap", "Quality tech leader with strong cash flows"),
    Recommendation("Stock", "MSFT", "Microsoft Corp.", "Tech - Large Cap", "Cloud and enterprise software dominance"),
    Recommendation("Stock", "JNJ", "Johnson & Johnson", "Healthcare", "Defensive dividend aristocrat"),
    Recommendation("Stock", "JPM", "JPMorgan Chase", "Financials", "Leading bank with diverse revenue"),
)
REITS: tuple[Recommendation, ...] = (
    Recommendation("REIT", "VNQ", "Vanguard Real Estate ETF", "Real Estate", "Diversified REIT exposure", "0.12%"),
    Recommendation("REIT", "O", "Realty Income Corp.", "Real Estate", 'Monthly dividend "aristocrat"'),
)
BOND_ETFS: tuple[Recommendation, ...] = (
    Recommendation("Bond ETF", "TLT", "iShares 20+ Year Treasury", "Long-term Bonds",
                   "Long duration treasury exposure", "0.15%"),
    Recommendation("Bond ETF", "LQD", "iShares Investment Grade Corp", "Corporate Bonds",
                   "Quality corporate bond income", "0.14%"),
)
COMMODITIES: tuple[Recommendation, ...] = (
    Recommendation("Commodity", "GLD", "SPDR Gold Trust", "Commodities", "Inflation hedge and safe haven", "0.40%"),
    Recommendation("Commodity", "DBC", "Invesco DB Commodity", "Commodities", "Broad commodity exposure", "0.85%"),
)
CRYPTO: tuple[Recommendation, ...] = (
    Recommendation("Crypto", "BTC", "Bitcoin", "Digital Assets", "Digital gold, store of value thesis"),
    Recommendation("Crypto", "ETH", "Ethereum", "Digital Assets", "Smart contract platform leader"),
)

INDIVIDUAL_SECURITY_TYPES = frozenset({"Stock"})


# ── Input guards ─────────────────────────────────────────────────────────────


def require_risk_score(risk_score: Any) -> float:
    """Reject a non-finite score. Range checks belong to the caller."""
    number = as_number(risk_score)
    if number is None:
        raise ValueError(f"risk score must be a finite number, got {risk_score!r}")
    return number


def investable_amount(value: Any) -> float:
    """Finite non-negative amount, else the 50k default."""
    number = as_number(value)
    if number is None or number < 0:
        return DEFAULT_INVESTABLE_AMOUNT
    return number


def interest_list(value: Any) -> list[str]:
    """String tags of a multi-choice answer; anything but a list, tuple or set is no answer."""
    if not isinstance(value, (list, tuple, set, frozenset)):
        return []
    return [tag for tag in value if isinstance(tag, str)]


def investment_style(value: Any) -> str:
    return value if isinstance(value, str) and value else DEFAULT_STYLE


def interest_set(interests: Any) -> set[str]:
    return set(interest_list(interests))


def has_specific_interest(interests: set[str]) -> bool:
    return bool(interests - {"none"})


# ── Allocation ───────────────────────────────────────────────────────────────


def _entry(category: str, percentage: int, subcategories: tuple[Subcategory, ...]) -> AllocationEntry:
    return AllocationEntry(category, percentage, CATEGORY_COLORS[category], subcategories)


def build_allocation(
    risk_score: float,
    interests: Iterable[str] | None,
    style: str | None = DEFAULT_STYLE,
    amount: Any = DEFAULT_INVESTABLE_AMOUNT,
) -> list[AllocationEntry]:
    """Percentage allocation across up to seven asset categories.

    `style` and `amount` do not move the percentages today; they are part of
    the contract so callers pass the full investor context.
    """
    score = require_risk_score(risk_score)
    chosen = interest_set(interests)
    open_to_all = not has_specific_interest(chosen)

    equity_base = 30 + score * 0.5
    fixed_base = 50 - score * 0.4

    entries: list[AllocationEntry] = []
    if "us-stocks" in chosen or open_to_all:
        entries.append(_entry("US Equities", round_half_up(equity_base * 0.6), US_EQUITY_SUBS))
    if "intl-stocks" in chosen or open_to_all:
        entries.append(
            _entry("International Equities", round_half_up(equity_base * 0.25), INTL_EQUITY_SUBS)
        )

    entries.append(_entry("Fixed Income", round_half_up(fixed_base), FIXED_INCOME_SUBS))

    if "real-estate" in chosen or score > 40:
        entries.append(_entry("Real Estate", min(15, round_half_up(score * 0.15)), REAL_ESTATE_SUBS))
    if "alternatives" in chosen or "commodities" in chosen or score > 50:
        entries.append(_entry("Alternatives", min(10, round_half_up(score * 0.1)), ALTERNATIVES_SUBS))
    if "crypto" in chosen and score > 45:
        entries.append(
            _entry("Digital Assets", min(5, round_half_up((score - 45) * 0.15)), DIGITAL_ASSET_SUBS)
        )

    entries.append(
        _entry("Cash & Equivalents", max(2, 10 - round_half_up(score * 0.08)), CASH_SUBS)
    )
    return entries


def allocation_total(entries: Iterable[AllocationEntry]) -> int:
    return sum(e.percentage for e in entries)


# ── Recommendations ──────────────────────────────────────────────────────────


def build_recommendations(
    risk_score: float,
    interests: Iterable[str] | None,
    style: str | None = DEFAULT_STYLE,
    amount: Any = DEFAULT_INVESTABLE_AMOUNT,
) -> list[Recommendation]:
    score = require_risk_score(risk_score)
    chosen = interest_set(interests)
    capital = investable_amount(amount)

    recommendations = list(CORE_ETFS)
    if capital >= INDIVIDUAL_STOCK_MIN_AMOUNT and score > 40:
        recommendations.extend(INDIVIDUAL_STOCKS)
    if "real-estate" in chosen or score > 45:
        recommendations.extend(REITS)
    if score < 50 or capital >= BOND_LADDER_MIN_AMOUNT:
        recommendations.extend(BOND_ETFS)
    if "alternatives" in chosen or "commodities" in chosen:
        recommendations.extend(COMMODITIES)
    if "crypto" in chosen and score > 50:
        recommendations.extend(CRYPTO)
    return recommendations


# ── Action plan ──────────────────────────────────────────────────────────────


def build_action_plan(risk_score: float, responses: dict[str, Any]) -> list[ActionPlanStep]:
    """Ordered steps; the emergency-fund step leads only when savings are short."""
    require_risk_score(risk_score)
    capital = investable_amount(responses.get("goal-amount"))
    emergency_months = as_number(responses.get("emergency-fund")) or 0
    deploy_share = "70%" if capital > STAGED_DEPLOYMENT_MIN_AMOUNT else "100%"

    steps: list[tuple[str, str, str]] = []
    if emergency_months < EMERGENCY_FUND_TARGET_MONTHS:
        steps.append((
            "Build Emergency Fund First",
            "Before investing, ensure you have 3-6 months of expenses in liquid savings.",
            "1-3 months",
        ))
    steps.extend([
        (
            "Open Investment Accounts",
            "Set up brokerage accounts (taxable and tax-advantaged). "
            "Consider Fidelity, Schwab, or Vanguard for low costs.",
            "This week",
        ),
        (
            "Establish Core Holdings",
            "Deploy initial capital into your primary ETF positions (VTI, VXUS, BND). "
            f"Start with {deploy_share} of funds.",
            "1-2 weeks",
        ),
        (
            "Automate Contributions",
            "Set up automatic monthly investments to remove emotion and ensure consistency.",
            "30 days",
        ),
        (
            "Add Satellite Positions",
            "Once core is established, consider adding individual stocks, REITs, or alternative assets.",
            "60-90 days",
        ),
        (
            "Schedule Portfolio Review",
            "Set quarterly calendar reminders to review allocation and rebalance as needed.",
            "Ongoing",
        ),
    ])
    return [
        ActionPlanStep(priority=i, title=title, description=description, timeframe=timeframe)
        for i, (title, description, timeframe) in enumerate(steps, start=1)
    ]


# ── Key metrics ──────────────────────────────────────────────────────────────


def to_fixed(value: float, digits: int) -> str:
    """Fixed-point string of the exact binary value, ties rounded away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_years(years: float) -> str:
    return f"{int(years)} years" if float(years).is_integer() else f"{years} years"


def build_key_metrics(risk_score: float, horizon_years: Any = DEFAULT_HORIZON_YEARS) -> KeyMetrics:
    score = require_risk_score(risk_score)
    horizon = as_number(horizon_years) or DEFAULT_HORIZON_YEARS

    expected_return = 3 + score * 0.07
    volatility = 4 + score * 0.18
    drawdown = 8 + score * 0.35
    sharpe = 0.3 + score * 0.008

    return KeyMetrics(
        expected_return=expected_return,
        volatility=volatility,
        max_drawdown=-drawdown,
        sharpe_ratio=sharpe,
        time_horizon=format_years(horizon),
        expected_return_display=f"{to_fixed(expected_return, 1)}%",
        volatility_display=f"{to_fixed(volatility, 1)}%",
        max_drawdown_display=f"-{to_fixed(drawdown, 0)}%",
        sharpe_ratio_display=to_fixed(sharpe, 2),
    )
