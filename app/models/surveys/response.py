"""Respondent answers - transient, never persisted."""

from dataclasses import dataclass, field


@dataclass
class QuestionAnswer:
    """Answer id a respondent picked for a question."""

    question_id: str
    answer_id: str | None


@dataclass
class RawResponse:
    """All answers of one respondent."""

    respondent_id: str
    questions: list[QuestionAnswer] = field(default_factory=list)

    def answers_by_question(self) -> dict[str, str | None]:
        """Map question id -> chosen answer id (first entry wins)."""
        answers: dict[str, str | None] = {}
        for q in self.questions:
            answers.setdefault(q.question_id, q.answer_id)
        return answers
