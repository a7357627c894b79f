"""Investor questionnaire catalogue: sections, questions and scenario deltas.

Every question kind is its own frozen dataclass; `Question` is the union the
rest of the module dispatches on. The catalogue is built once at import time
and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

DIMENSIONS: tuple[str, ...] = ("risk", "decision", "time", "focus")


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    description: str


@dataclass(frozen=True)
class Option:
    value: str
    label: str
    description: str = ""
    score: int | None = None  # risk-score contribution, where the option carries one


@dataclass(frozen=True)
class TextQuestion:
    id: str
    section: str
    prompt: str
    subtitle: str
    placeholder: str = ""
    multiline: bool = False
    kind: str = field(default="text", init=False)


@dataclass(frozen=True)
class SingleChoiceQuestion:
    id: str
    section: str
    prompt: str
    subtitle: str
    options: tuple[Option, ...]
    kind: str = field(default="single_choice", init=False)

    def values(self) -> set[str]:
        return {o.value for o in self.options}


@dataclass(frozen=True)
class MultiChoiceQuestion:
    id: str
    section: str
    prompt: str
    subtitle: str
    options: tuple[Option, ...]
    exclusive_value: str | None = None  # selecting it clears every other tag
    kind: str = field(default="multi_choice", init=False)

    def values(self) -> set[str]:
        return {o.value for o in self.options}


@dataclass(frozen=True)
class SliderQuestion:
    id: str
    section: str
    prompt: str
    subtitle: str
    minimum: float
    maximum: float
    step: float
    default: int
    unit: str
    steps: tuple[int, ...] = ()  # discrete ladder; empty means continuous
    kind: str = field(default="slider", init=False)


@dataclass(frozen=True)
class ScenarioChoice:
    label: str
    description: str
    traits: tuple[str, ...]
    deltas: tuple[tuple[str, int], ...]  # (dimension, signed delta)


@dataclass(frozen=True)
class ScenarioQuestion:
    id: str
    section: str
    prompt: str
    subtitle: str
    choice_a: ScenarioChoice
    choice_b: ScenarioChoice
    kind: str = field(default="scenario", init=False)

    def choice(self, answer: object) -> ScenarioChoice | None:
        if answer == "A":
            return self.choice_a
        if answer == "B":
            return self.choice_b
        return None


Question = Union[
    TextQuestion, SingleChoiceQuestion, MultiChoiceQuestion, SliderQuestion, ScenarioQuestion
]


# ── Sections ─────────────────────────────────────────────────────────────────

SECTIONS: tuple[Section, ...] = (
    Section("welcome", "Getting Started", "Let's personalize your experience"),
    Section("goals", "Your Investment Goals", "Understanding what you want to achieve helps us build the right strategy"),
    Section("risk", "Risk Assessment", "Your comfort with volatility shapes your portfolio allocation"),
    Section("financial", "Financial Situation", "Your current position influences how much risk you can take"),
    Section("preferences", "Investment Preferences", "Your philosophy and interests guide our recommendations"),
    Section("vision", "Your Vision", "Defining success helps us measure progress"),
    Section("personality", "Your Investor DNA", "Discover your investing personality, like Myers-Briggs for finance"),
)

SECTIONS_BY_KEY: dict[str, Section] = {s.key: s for s in SECTIONS}

INVESTABLE_AMOUNTS: tuple[int, ...] = (
    10_000, 25_000, 50_000, 100_000, 250_000, 500_000, 1_000_000, 5_000_000,
)

# ── Questions ────────────────────────────────────────────────────────────────

QUESTIONS: tuple[Question, ...] = (
    TextQuestion(
        id="name",
        section="welcome",
        prompt="What should we call you?",
        subtitle="We'll use this to personalize your investment strategy report.",
        placeholder="Your first name",
    ),
    # Goals
    SingleChoiceQuestion(
        id="goal-primary",
        section="goals",
        prompt="What's your primary investment objective?",
        subtitle="This determines the core focus of your portfolio strategy.",
        options=(
            Option("wealth-growth", "Wealth Growth", "Maximize long-term capital appreciation"),
            Option("retirement", "Retirement", "Build a secure retirement nest egg"),
            Option("income", "Passive Income", "Generate regular cash flow from investments"),
            Option("preservation", "Wealth Preservation", "Protect and maintain purchasing power"),
        ),
    ),
    SliderQuestion(
        id="goal-timeline",
        section="goals",
        prompt="What's your investment time horizon?",
        subtitle="Longer horizons allow for more growth-oriented strategies.",
        minimum=1, maximum=30, step=1, default=10, unit="years",
    ),
    SliderQuestion(
        id="goal-amount",
        section="goals",
        prompt="What's your investable amount?",
        subtitle="This helps us recommend appropriate diversification and investment vehicles.",
        minimum=0, maximum=INVESTABLE_AMOUNTS[-1], step=1, default=50_000, unit="USD",
        steps=INVESTABLE_AMOUNTS,
    ),
    # Risk
    SingleChoiceQuestion(
        id="risk-scenario",
        section="risk",
        prompt="Your portfolio drops 25% in a month. Your reaction?",
        subtitle="Your instinctive response reveals your true risk tolerance.",
        options=(
            Option("sell-all", "Sell everything", score=-20),
            Option("sell-some", "Reduce exposure", score=-10),
            Option("hold", "Stay the course", score=10),
            Option("buy-more", "Buy the dip", score=20),
        ),
    ),
    SliderQuestion(
        id="risk-tolerance",
        section="risk",
        prompt="What's the maximum annual loss you could tolerate?",
        subtitle="This sets the guardrails for your portfolio's volatility.",
        minimum=5, maximum=50, step=5, default=20, unit="%",
    ),
    SingleChoiceQuestion(
        id="risk-experience",
        section="risk",
        prompt="Have you invested through a major market downturn?",
        subtitle="Past experience shapes how you'll handle future volatility.",
        options=(
            Option("never", "No prior experience", "We'll start you with a steadier allocation", score=-10),
            Option("watched", "Yes, but sold early", "Understanding your triggers helps us build a better plan", score=-5),
            Option("held", "Yes, and held through", "Battle-tested discipline is valuable", score=5),
            Option("bought", "Yes, and bought more", "Contrarian strength is rare and powerful", score=15),
        ),
    ),
    # Financial situation
    SingleChoiceQuestion(
        id="income-stability",
        section="financial",
        prompt="How stable is your primary income?",
        subtitle="Stable income allows for more aggressive investing.",
        options=(
            Option("very-stable", "Very Stable", "Secure employment, predictable income"),
            Option("stable", "Mostly Stable", "Good job security with some variability"),
            Option("variable", "Variable", "Commission, freelance, or seasonal"),
            Option("uncertain", "Uncertain", "Business owner or startup"),
        ),
    ),
    SliderQuestion(
        id="emergency-fund",
        section="financial",
        prompt="How many months of expenses in emergency savings?",
        subtitle="A solid emergency fund lets you invest without needing to sell at bad times.",
        minimum=0, maximum=24, step=1, default=6, unit="months",
    ),
    MultiChoiceQuestion(
        id="existing-assets",
        section="financial",
        prompt="What do you currently own?",
        subtitle="Select all that apply. This helps us understand your starting point.",
        options=(
            Option("stocks", "Stocks"),
            Option("bonds", "Bonds"),
            Option("real-estate", "Real Estate"),
            Option("crypto", "Crypto"),
            Option("business", "Business Equity"),
            Option("alternatives", "Alternatives"),
            Option("none", "Starting Fresh"),
        ),
        exclusive_value="none",
    ),
    # Preferences
    SingleChoiceQuestion(
        id="pref-style",
        section="preferences",
        prompt="Which investment philosophy resonates with you?",
        subtitle="Your approach influences how we construct your portfolio.",
        options=(
            Option("passive", "Index Investing", "Low-cost, broad market exposure"),
            Option("active", "Active Management", "Seeking alpha through selection"),
            Option("value", "Value Investing", "Finding underpriced assets"),
            Option("growth", "Growth Investing", "High-growth companies"),
            Option("income", "Income Focused", "Dividends and yield"),
        ),
    ),
    MultiChoiceQuestion(
        id="pref-assets",
        section="preferences",
        prompt="Which asset classes interest you most?",
        subtitle="Select multiple. We'll incorporate your interests into the allocation.",
        options=(
            Option("us-stocks", "US Equities"),
            Option("intl-stocks", "International"),
            Option("bonds", "Fixed Income"),
            Option("real-estate", "Real Estate"),
            Option("crypto", "Digital Assets"),
            Option("alternatives", "Alternatives"),
            Option("commodities", "Commodities"),
            Option("business", "Private Business"),
            Option("none", "No Preference"),
        ),
        exclusive_value="none",
    ),
    SliderQuestion(
        id="pref-involvement",
        section="preferences",
        prompt="How hands-on do you want to be?",
        subtitle="This affects whether we recommend self-managed or advisory solutions.",
        minimum=0, maximum=100, step=25, default=50, unit="level",
    ),
    # Vision
    TextQuestion(
        id="vision-success",
        section="vision",
        prompt="What does investment success look like for you in 10 years?",
        subtitle="Paint a picture of your financial future.",
        placeholder="E.g., Financial independence, a second home, college funds for kids...",
        multiline=True,
    ),
    # Personality (forced-choice vignettes, scored only into dimensions)
    ScenarioQuestion(
        id="personality-journey",
        section="personality",
        prompt="If investing were a journey, which describes you better?",
        subtitle="This reveals your natural approach to uncertainty and reward.",
        choice_a=ScenarioChoice(
            "The Mountain Climber",
            "Calculated ascent with safety ropes. Every step is planned.",
            ("Methodical", "Risk-aware", "Patient"),
            (("risk", -25),),
        ),
        choice_b=ScenarioChoice(
            "The Explorer",
            "Uncharted territories excite you. The greatest discoveries come from bold moves.",
            ("Adventurous", "Opportunistic", "Bold"),
            (("risk", 25),),
        ),
    ),
    ScenarioQuestion(
        id="personality-dinner-party",
        section="personality",
        prompt="At a dinner party, someone shares an exciting investment tip. Your instinct?",
        subtitle="This reveals how you process new investment information.",
        choice_a=ScenarioChoice(
            "\"Interesting, I'll research it thoroughly first\"",
            "You appreciate the tip but need to verify everything yourself.",
            ("Cautious", "Due-diligence focused"),
            (("risk", -15), ("decision", -15)),
        ),
        choice_b=ScenarioChoice(
            "\"Tell me more! This could be the next big thing\"",
            "Your ears perk up at opportunity.",
            ("Opportunistic", "Excitement-driven"),
            (("risk", 15), ("decision", 15)),
        ),
    ),
    ScenarioQuestion(
        id="personality-regret",
        section="personality",
        prompt="Which regret would haunt you more?",
        subtitle="This reveals your core investment psychology.",
        choice_a=ScenarioChoice(
            "Missing out on 50% gains",
            "You played it safe while others made a fortune.",
            ("Fear of missing out", "Growth-oriented"),
            (("risk", 20), ("focus", 10)),
        ),
        choice_b=ScenarioChoice(
            "Losing 30% of your savings",
            "You took a risk and it didn't work out. That money took years to save.",
            ("Loss aversion", "Security-oriented"),
            (("risk", -20), ("focus", -10)),
        ),
    ),
    ScenarioQuestion(
        id="personality-restaurant",
        section="personality",
        prompt="How do you pick a restaurant in a new city?",
        subtitle="How you make everyday decisions often mirrors how you invest.",
        choice_a=ScenarioChoice(
            "Research Mode",
            "Check reviews, compare ratings, look at menus. Information is power.",
            ("Analytical", "Thorough", "Data-driven"),
            (("decision", -25),),
        ),
        choice_b=ScenarioChoice(
            "Instinct Mode",
            "Walk around, see what feels right, trust the vibe.",
            ("Intuitive", "Spontaneous", "Trusts gut"),
            (("decision", 25),),
        ),
    ),
    ScenarioQuestion(
        id="personality-gardening",
        section="personality",
        prompt="Your approach to a garden would be:",
        subtitle="This metaphor reveals your investment temperament.",
        choice_a=ScenarioChoice(
            "Plant and let nature work",
            "Choose good seeds, plant them well, then trust the process.",
            ("Patient", "Long-term thinker", "Hands-off"),
            (("time", -25),),
        ),
        choice_b=ScenarioChoice(
            "Active cultivation",
            "Regular attention, pruning, adjusting.",
            ("Active", "Engaged", "Hands-on"),
            (("time", 25),),
        ),
    ),
    ScenarioQuestion(
        id="personality-winner",
        section="personality",
        prompt="Your investment is up 40% in 6 months. What do you do?",
        subtitle="This reveals your trading temperament.",
        choice_a=ScenarioChoice(
            "Hold for the long term",
            "Winners keep winning. If the thesis is intact, why sell?",
            ("Patient", "Conviction holder"),
            (("time", -20), ("focus", 10)),
        ),
        choice_b=ScenarioChoice(
            "Take some profits",
            "Lock in gains, reduce risk, find the next opportunity.",
            ("Active manager", "Profit taker"),
            (("time", 20), ("focus", -10)),
        ),
    ),
    ScenarioQuestion(
        id="personality-buffet",
        section="personality",
        prompt="At an all-you-can-eat buffet, you:",
        subtitle="This reveals your natural allocation instincts.",
        choice_a=ScenarioChoice(
            "Sample everything",
            "A little of this, a little of that. Variety is the spice of life.",
            ("Diversifier", "Variety seeker"),
            (("focus", -25),),
        ),
        choice_b=ScenarioChoice(
            "Fill up on your favorites",
            "You know what you like.",
            ("Concentrator", "Conviction-driven"),
            (("focus", 25),),
        ),
    ),
    ScenarioQuestion(
        id="personality-wisdom",
        section="personality",
        prompt="Which investing wisdom resonates more?",
        subtitle="This reveals your portfolio philosophy.",
        choice_a=ScenarioChoice(
            "\"Don't put all eggs in one basket\"",
            "Classic wisdom. Diversification protects against the unexpected.",
            ("Traditional", "Risk-averse"),
            (("focus", -20),),
        ),
        choice_b=ScenarioChoice(
            "\"Put eggs in one basket, watch it closely\"",
            "Concentration builds wealth.",
            ("Contrarian", "High-conviction"),
            (("focus", 20),),
        ),
    ),
)

QUESTIONS_BY_ID: dict[str, Question] = {q.id: q for q in QUESTIONS}


def get_question(question_id: str) -> Question | None:
    return QUESTIONS_BY_ID.get(question_id)


def scenario_questions() -> tuple[ScenarioQuestion, ...]:
    return tuple(q for q in QUESTIONS if isinstance(q, ScenarioQuestion))


def slider_defaults() -> dict[str, int]:
    """Default answer for every slider question, keyed by question id."""
    return {q.id: q.default for q in QUESTIONS if isinstance(q, SliderQuestion)}


@dataclass(frozen=True)
class Page:
    index: int
    section: str
    title: str
    question_ids: tuple[str, ...]


def pages() -> tuple[Page, ...]:
    """One page per question; the name is captured at sign-in, not paged."""
    paged = [q for q in QUESTIONS if q.id != "name"]
    return tuple(
        Page(
            index=i,
            section=q.section,
            title=SECTIONS_BY_KEY[q.section].title,
            question_ids=(q.id,),
        )
        for i, q in enumerate(paged)
    )
