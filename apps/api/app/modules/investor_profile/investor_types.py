"""Investor personality types and the investment glossary.

Four binary axes give sixteen codes:
  risk      G (guardian) / P (pioneer)
  decision  A (analytical) / I (intuitive)
  time      P (patient) / A (active)
  focus     D (diversifier) / C (concentrator)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SuggestedAllocation:
    stocks: int
    bonds: int
    alternatives: int
    cash: int


@dataclass(frozen=True)
class InvestorType:
    code: str
    name: str
    tagline: str
    description: str
    strengths: tuple[str, ...]
    challenges: tuple[str, ...]
    famous_examples: tuple[str, ...]
    suggested_allocation: SuggestedAllocation


@dataclass(frozen=True)
class GlossaryTerm:
    key: str
    term: str
    definition: str
    example: str = ""


DEFAULT_TYPE_CODE = "GAPD"

_TYPES: tuple[InvestorType, ...] = (
    # ── Guardians ────────────────────────────────────────────────────────────
    InvestorType(
        code="GAPD",
        name="The Steward",
        tagline="Guardian of wealth through careful stewardship",
        description=(
            "You are the ultimate wealth preserver. Patient, analytical, and diversified, you "
            "believe in the power of compound interest over time. Your portfolio is a fortress "
            "designed to withstand any storm."
        ),
        strengths=(
            "Excellent at capital preservation",
            "Disciplined and patient",
            "Well-diversified portfolios",
            "Low emotional reactivity",
        ),
        challenges=(
            "May miss high-growth opportunities",
            "Can be overly cautious",
            "May underperform in bull markets",
        ),
        famous_examples=("Warren Buffett (in preservation mode)", "John Bogle"),
        suggested_allocation=SuggestedAllocation(stocks=40, bonds=40, alternatives=10, cash=10),
    ),
    InvestorType(
        code="GAPC",
        name="The Strategist",
        tagline="Concentrated conviction built on deep research",
        description=(
            "You combine careful analysis with high-conviction bets. While risk-aware, you believe "
            "that deep research justifies concentrated positions in your best ideas."
        ),
        strengths=("Deep research capabilities", "High-conviction investing", "Patience to hold winners"),
        challenges=("Concentration risk", "May be slow to act", "Analysis paralysis"),
        famous_examples=("Charlie Munger", "Bill Ackman"),
        suggested_allocation=SuggestedAllocation(stocks=50, bonds=30, alternatives=15, cash=5),
    ),
    InvestorType(
        code="GIPD",
        name="The Guardian",
        tagline="Protecting wealth through intuitive diversification",
        description=(
            "You trust your gut while maintaining a safety-first approach. Your portfolio is "
            "well-diversified, but you rely on instinct as much as spreadsheets."
        ),
        strengths=("Good intuition for risk", "Flexible thinking", "Quick to sense danger"),
        challenges=("May lack analytical rigor", "Decisions can be inconsistent"),
        famous_examples=("Paul Tudor Jones (defensive mode)",),
        suggested_allocation=SuggestedAllocation(stocks=45, bonds=35, alternatives=15, cash=5),
    ),
    InvestorType(
        code="GIPC",
        name="The Sentinel",
        tagline="Intuitive focus on proven winners",
        description=(
            "You combine protective instincts with concentrated positions in companies you trust. "
            "Quality over quantity, with an intuitive sense for value."
        ),
        strengths=("Strong quality focus", "Intuitive value recognition", "Patient with winners"),
        challenges=("May hold losers too long", "Concentration in comfort zone"),
        famous_examples=("Philip Fisher",),
        suggested_allocation=SuggestedAllocation(stocks=55, bonds=30, alternatives=10, cash=5),
    ),
    InvestorType(
        code="GAAD",
        name="The Architect",
        tagline="Engineering portfolios with systematic precision",
        description=(
            "You actively manage a diversified portfolio using analytical frameworks. Factor "
            "models, rebalancing rules, and systematic approaches define your style."
        ),
        strengths=("Systematic approach", "Risk-managed active trading", "Data-driven decisions"),
        challenges=("Over-optimization risk", "May overthink simple decisions"),
        famous_examples=("Ray Dalio", "Cliff Asness"),
        suggested_allocation=SuggestedAllocation(stocks=50, bonds=25, alternatives=20, cash=5),
    ),
    InvestorType(
        code="GAAC",
        name="The Surgeon",
        tagline="Precision trades in concentrated positions",
        description=(
            "You actively trade with surgical precision, focusing on a select few opportunities "
            "analyzed in depth. Every trade is calculated and purposeful."
        ),
        strengths=("Precision trading", "Deep position knowledge", "Active risk management"),
        challenges=("High transaction costs", "Concentration risk", "Stress from active monitoring"),
        famous_examples=("Michael Burry", "David Einhorn"),
        suggested_allocation=SuggestedAllocation(stocks=60, bonds=20, alternatives=15, cash=5),
    ),
    InvestorType(
        code="GIAD",
        name="The Tactician",
        tagline="Active intuitive diversification",
        description=(
            "You actively trade across a diversified portfolio, trusting your instincts for "
            "timing while spreading risk across many positions."
        ),
        strengths=("Quick reflexes", "Broad opportunity set", "Adaptive to conditions"),
        challenges=("May overtrade", "Inconsistent methodology"),
        famous_examples=("George Soros (defensive trades)",),
        suggested_allocation=SuggestedAllocation(stocks=50, bonds=25, alternatives=20, cash=5),
    ),
    InvestorType(
        code="GIAC",
        name="The Craftsman",
        tagline="Hands-on management of core holdings",
        description=(
            "You actively tend to a concentrated portfolio of companies you know deeply, using "
            "intuition and experience to time adjustments."
        ),
        strengths=("Deep company knowledge", "Active position management", "Relationship with holdings"),
        challenges=("Overconfidence in picks", "May miss broader trends"),
        famous_examples=("Peter Lynch",),
        suggested_allocation=SuggestedAllocation(stocks=60, bonds=25, alternatives=10, cash=5),
    ),
    # ── Pioneers ─────────────────────────────────────────────────────────────
    InvestorType(
        code="PAPD",
        name="The Visionary",
        tagline="Patient analytical approach to growth investing",
        description=(
            "You pursue high growth through careful analysis and patient holding. Diversified "
            "but focused on high-potential opportunities."
        ),
        strengths=("Long-term growth focus", "Analytical rigor", "Diversified risk-taking"),
        challenges=("May be too patient", "Growth bias can hurt in downturns"),
        famous_examples=("Cathie Wood", "Ron Baron"),
        suggested_allocation=SuggestedAllocation(stocks=70, bonds=15, alternatives=12, cash=3),
    ),
    InvestorType(
        code="PAPC",
        name="The Pioneer",
        tagline="Bold bets backed by deep conviction",
        description=(
            "You make concentrated bets on transformative opportunities after thorough analysis. "
            "High risk, high conviction, high potential reward."
        ),
        strengths=("Transformational thinking", "Deep research", "Conviction to hold"),
        challenges=("High concentration risk", "May be early on ideas", "Drawdown tolerance needed"),
        famous_examples=("Warren Buffett (growth mode)", "Stanley Druckenmiller"),
        suggested_allocation=SuggestedAllocation(stocks=75, bonds=10, alternatives=12, cash=3),
    ),
    InvestorType(
        code="PIPD",
        name="The Adventurer",
        tagline="Diverse opportunities through intuitive discovery",
        description=(
            "You cast a wide net for opportunities, trusting your instincts to find hidden gems "
            "across many sectors and asset classes."
        ),
        strengths=("Opportunity discovery", "Flexible thinking", "Diverse exposure"),
        challenges=("May lack discipline", "Scattered approach"),
        famous_examples=("Jim Rogers",),
        suggested_allocation=SuggestedAllocation(stocks=65, bonds=15, alternatives=17, cash=3),
    ),
    InvestorType(
        code="PIPC",
        name="The Maverick",
        tagline="Concentrated bets on intuitive conviction",
        description=(
            "You trust your gut to identify winners and bet big. Bold, intuitive, and willing "
            "to be contrarian."
        ),
        strengths=("Contrarian thinking", "Bold action", "Strong conviction"),
        challenges=("High risk of large losses", "May ignore data"),
        famous_examples=("Carl Icahn", "Keith Gill"),
        suggested_allocation=SuggestedAllocation(stocks=70, bonds=10, alternatives=15, cash=5),
    ),
    InvestorType(
        code="PAAD",
        name="The Optimizer",
        tagline="Active systematic trading across markets",
        description=(
            "You actively trade a diversified portfolio using quantitative methods and "
            "systematic approaches to capture returns across markets."
        ),
        strengths=("Systematic edge", "Diversified alpha", "Active risk management"),
        challenges=("Model risk", "Overfitting", "High turnover costs"),
        famous_examples=("Jim Simons", "David Shaw"),
        suggested_allocation=SuggestedAllocation(stocks=55, bonds=15, alternatives=27, cash=3),
    ),
    InvestorType(
        code="PAAC",
        name="The Sniper",
        tagline="Concentrated active trading with analytical precision",
        description=(
            "You actively trade concentrated positions with analytical rigor, seeking to capture "
            "specific opportunities with precision timing."
        ),
        strengths=("Precise entry/exit", "Concentrated alpha", "Analytical edge"),
        challenges=("Very high risk", "Stress intensive", "High skill required"),
        famous_examples=("Jesse Livermore", "Paul Tudor Jones"),
        suggested_allocation=SuggestedAllocation(stocks=65, bonds=10, alternatives=20, cash=5),
    ),
    InvestorType(
        code="PIAD",
        name="The Explorer",
        tagline="Active discovery across diverse opportunities",
        description=(
            "You actively explore and trade across many asset classes, following your intuition "
            "and momentum across diverse markets."
        ),
        strengths=("Opportunistic", "Adaptable", "Broad knowledge"),
        challenges=("May chase trends", "Lack of focus"),
        famous_examples=("Mark Cuban",),
        suggested_allocation=SuggestedAllocation(stocks=60, bonds=10, alternatives=25, cash=5),
    ),
    InvestorType(
        code="PIAC",
        name="The Daredevil",
        tagline="Bold active trading on concentrated conviction",
        description=(
            "You actively trade large positions based on intuition and conviction. High risk "
            "tolerance with an action-oriented approach."
        ),
        strengths=("Bold action", "Quick decisions", "High conviction"),
        challenges=("Extreme risk", "Emotional volatility", "Potential for large losses"),
        famous_examples=("Bill Hwang", "John Paulson"),
        suggested_allocation=SuggestedAllocation(stocks=65, bonds=5, alternatives=25, cash=5),
    ),
)

INVESTOR_TYPES: dict[str, InvestorType] = {t.code: t for t in _TYPES}


def get_investor_type(code: str | None) -> InvestorType:
    """Look up a type by code, falling back to The Steward."""
    return INVESTOR_TYPES.get(code or "", INVESTOR_TYPES[DEFAULT_TYPE_CODE])


GLOSSARY: tuple[GlossaryTerm, ...] = (
    GlossaryTerm(
        "risk-tolerance",
        "Risk Tolerance",
        "Your emotional and psychological ability to handle investment losses without panicking or making poor decisions.",
        "If a 20% portfolio drop would cause you sleepless nights, you have lower risk tolerance.",
    ),
    GlossaryTerm(
        "risk-capacity",
        "Risk Capacity",
        "Your financial ability to absorb losses based on your income, savings, time horizon, and financial obligations.",
        "A 25-year-old with stable income has higher risk capacity than a retiree living on savings.",
    ),
    GlossaryTerm(
        "time-horizon",
        "Time Horizon",
        "How long until you need to access your invested money for a specific goal.",
        "Retirement in 30 years = long horizon. House down payment in 3 years = short horizon.",
    ),
    GlossaryTerm(
        "diversification",
        "Diversification",
        "Spreading investments across different asset classes, sectors, and geographies to reduce risk.",
        "Owning stocks, bonds, real estate, and international investments rather than just one stock.",
    ),
    GlossaryTerm(
        "asset-allocation",
        "Asset Allocation",
        "How you divide your portfolio among different asset classes like stocks, bonds, real estate, and cash.",
        "A 60/40 portfolio has 60% stocks and 40% bonds.",
    ),
    GlossaryTerm(
        "compound-growth",
        "Compound Growth",
        "Earning returns on your returns. Over time, this creates exponential wealth growth.",
        "$10,000 at 7% annual return grows to $76,000 in 30 years without adding money.",
    ),
    GlossaryTerm(
        "rebalancing",
        "Rebalancing",
        "Periodically adjusting your portfolio back to your target allocation as markets move.",
        "If stocks surge and become 70% of your portfolio (target 60%), you sell some to restore balance.",
    ),
    GlossaryTerm(
        "volatility",
        "Volatility",
        "How much an investment's value fluctuates up and down over time.",
        "Tech stocks are more volatile than Treasury bonds, with bigger swings both up and down.",
    ),
    GlossaryTerm(
        "liquidity",
        "Liquidity",
        "How quickly and easily you can convert an investment to cash without significant loss.",
        "Stocks are liquid (sell in seconds). Real estate is illiquid (can take months to sell).",
    ),
    GlossaryTerm(
        "expense-ratio",
        "Expense Ratio",
        "The annual fee charged by funds as a percentage of your investment.",
        "A 0.03% expense ratio costs $3 per year for every $10,000 invested.",
    ),
)
