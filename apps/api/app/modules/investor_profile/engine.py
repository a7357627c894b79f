"""Report pipeline and questionnaire session state.

normalize -> score risk -> classify type -> allocation / recommendations /
action plan -> narrative. Every step is pure; timestamps are stamped by the
service layer, never here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import structlog

from app.modules.investor_profile.allocation import (
    ActionPlanStep,
    AllocationEntry,
    KeyMetrics,
    Recommendation,
    allocation_total,
    build_action_plan,
    build_allocation,
    build_key_metrics,
    build_recommendations,
    interest_list,
    investable_amount,
    investment_style,
)
from app.modules.investor_profile.catalogue import (
    MultiChoiceQuestion,
    Page,
    Question,
    ScenarioQuestion,
    SingleChoiceQuestion,
    SliderQuestion,
    TextQuestion,
    get_question,
    pages,
    slider_defaults,
)
from app.modules.investor_profile.investor_types import InvestorType
from app.modules.investor_profile.narrative import Narrative, build_narrative
from app.modules.investor_profile.scoring import (
    InvestorDimensions,
    RiskProfile,
    as_number,
    build_risk_profile,
    classify,
    compute_dimensions,
    compute_risk_score,
    normalize_responses,
)

logger = structlog.get_logger()

DEFAULT_USER_NAME = "Investor"


class InvalidAnswerError(ValueError):
    """An answer that does not fit its question."""

    def __init__(self, question_id: str, message: str) -> None:
        super().__init__(f"{question_id}: {message}")
        self.question_id = question_id


@dataclass(frozen=True)
class Report:
    user_name: str
    risk_profile: RiskProfile
    investor_type_code: str
    investor_type: InvestorType
    dimensions: InvestorDimensions
    allocation: list[AllocationEntry]
    allocation_total: int
    recommendations: list[Recommendation]
    key_metrics: KeyMetrics
    narrative: Narrative
    action_plan: list[ActionPlanStep]
    investment_amount: float


def _user_name(explicit: str | None, responses: dict[str, Any]) -> str:
    for candidate in (explicit, responses.get("name")):
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    return DEFAULT_USER_NAME


def generate_report(responses: dict[str, Any] | None, user_name: str | None = None) -> Report:
    """Run the whole pipeline on a normalised copy of the answers."""
    answers = normalize_responses(responses)
    name = _user_name(user_name, answers)

    risk_score = compute_risk_score(answers)
    dimensions = compute_dimensions(answers)
    code, investor_type = classify(dimensions)

    interests = interest_list(answers.get("pref-assets"))
    style = investment_style(answers.get("pref-style"))
    amount = investable_amount(answers.get("goal-amount"))

    allocation = build_allocation(risk_score, interests, style, amount)
    report = Report(
        user_name=name,
        risk_profile=build_risk_profile(risk_score),
        investor_type_code=code,
        investor_type=investor_type,
        dimensions=dimensions,
        allocation=allocation,
        allocation_total=allocation_total(allocation),
        recommendations=build_recommendations(risk_score, interests, style, amount),
        key_metrics=build_key_metrics(risk_score, answers.get("goal-timeline")),
        narrative=build_narrative(risk_score, answers, name),
        action_plan=build_action_plan(risk_score, answers),
        investment_amount=amount,
    )

    logger.debug(
        "investor_report_generated",
        risk_score=risk_score,
        investor_type=code,
        allocation_total=report.allocation_total,
    )
    return report


# ── Session ──────────────────────────────────────────────────────────────────


def _is_answered(value: Any) -> bool:
    if value is None or value == "":
        return False
    if isinstance(value, (list, tuple, set)) and not value:
        return False
    return True


class QuestionnaireSession:
    """One user's pass through the questionnaire.

    Holds the answers (seeded with slider defaults) and the current page.
    Answers are validated against their question before they are stored.
    """

    def __init__(
        self,
        user_name: str | None = None,
        responses: dict[str, Any] | None = None,
    ) -> None:
        self.user_name = user_name
        self.responses: dict[str, Any] = dict(slider_defaults())
        self.page_index = 0
        self._pages: tuple[Page, ...] = pages()
        for question_id, value in (responses or {}).items():
            self.answer(question_id, value)

    # navigation

    @property
    def pages(self) -> tuple[Page, ...]:
        return self._pages

    @property
    def current_page(self) -> Page:
        return self._pages[self.page_index]

    @property
    def is_last_page(self) -> bool:
        return self.page_index == len(self._pages) - 1

    @property
    def progress(self) -> float:
        return (self.page_index + 1) / len(self._pages) * 100

    def is_page_complete(self) -> bool:
        return all(_is_answered(self.responses.get(qid)) for qid in self.current_page.question_ids)

    def next_page(self) -> bool:
        """Advance when the current page is complete; False when it cannot move."""
        if self.is_last_page or not self.is_page_complete():
            return False
        self.page_index += 1
        return True

    def previous_page(self) -> bool:
        if self.page_index == 0:
            return False
        self.page_index -= 1
        return True

    # answers

    def answer(self, question_id: str, value: Any) -> Any:
        """Validate and store an answer, overwriting any previous one."""
        question = get_question(question_id)
        if question is None:
            raise InvalidAnswerError(question_id, "unknown question")
        stored = self._validate(question, value)
        self.responses[question_id] = stored
        return stored

    def toggle(self, question_id: str, tag: str) -> list[str]:
        """Flip one tag of a multi-choice answer."""
        question = get_question(question_id)
        if not isinstance(question, MultiChoiceQuestion):
            raise InvalidAnswerError(question_id, "not a multi-choice question")
        current = list(self.responses.get(question_id) or [])
        if tag in current:
            current.remove(tag)
        else:
            current.append(tag)
        return self.answer(question_id, current)

    def _validate(self, question: Question, value: Any) -> Any:
        if isinstance(question, TextQuestion):
            if not isinstance(value, str):
                raise InvalidAnswerError(question.id, "expected text")
            return value

        if isinstance(question, SingleChoiceQuestion):
            if value not in question.values():
                raise InvalidAnswerError(question.id, f"unknown option {value!r}")
            return value

        if isinstance(question, MultiChoiceQuestion):
            return self._validate_tags(question, value)

        if isinstance(question, SliderQuestion):
            number = as_number(value)
            if number is None:
                raise InvalidAnswerError(question.id, f"expected a number, got {value!r}")
            if not question.minimum <= number <= question.maximum:
                raise InvalidAnswerError(
                    question.id,
                    f"{number} outside [{question.minimum}, {question.maximum}]",
                )
            return int(number) if float(number).is_integer() else number

        if isinstance(question, ScenarioQuestion):
            if value not in ("A", "B"):
                raise InvalidAnswerError(question.id, "expected 'A' or 'B'")
            return value

        raise InvalidAnswerError(question.id, "unsupported question kind")

    def _validate_tags(self, question: MultiChoiceQuestion, value: Any) -> list[str]:
        if isinstance(value, str) or not isinstance(value, Iterable):
            raise InvalidAnswerError(question.id, "expected a list of options")
        tags = list(dict.fromkeys(value))
        unknown = [t for t in tags if t not in question.values()]
        if unknown:
            raise InvalidAnswerError(question.id, f"unknown options {unknown!r}")

        exclusive = question.exclusive_value
        if exclusive and exclusive in tags and len(tags) > 1:
            previous = self.responses.get(question.id) or []
            # the exclusive tag wins only when it is the one being added
            tags = [exclusive] if exclusive not in previous else [t for t in tags if t != exclusive]

        order = [o.value for o in question.options]
        return sorted(tags, key=order.index)

    def to_report(self) -> Report:
        return generate_report(self.responses, self.user_name)
