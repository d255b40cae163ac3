"""Interactive questionnaire that collects the answers for a new plugin.

Each question is asked until its answer passes validation; invalid answers
are reported on the console and the same question is asked again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from rich.markup import escape
from rich.prompt import Prompt

from plugin_scaffold.scaffolder.models import RawAnswers
from plugin_scaffold.utils import console, print_error


Validator = Callable[[str], Optional[str]]


# ---------------------------------------------------------------------------
# Validators (return an error message, or None when the answer is valid)
# ---------------------------------------------------------------------------


def required(answer: str) -> Optional[str]:
    if not answer:
        return "Value is required"
    return None


def titlecased(answer: str) -> Optional[str]:
    """Accept empty answers; otherwise require at least one uppercase letter."""
    if answer and not any(char.isupper() for char in answer):
        return 'credential name must be titlecased, e.g. "Access Key" or "Personal Access Token"'
    return None


# ---------------------------------------------------------------------------
# Questionnaire
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Question:
    field: str
    message: str
    validate: Optional[Validator] = None
    strip: bool = True


QUESTIONNAIRE: tuple[Question, ...] = (
    Question("name", 'Plugin name (e.g. "aws" or "github") [required]', required),
    Question("platform_name", 'Platform name (e.g. "AWS" or "GitHub") [required]', required),
    Question("executable", 'Executable name (e.g. "aws" or "gh")'),
    Question(
        "credential_name",
        'Name of the credential type (e.g. "Access Key" or "Personal Access Token")',
        titlecased,
    ),
    Question("example_credential", "Paste in an example credential", strip=False),
)


def _rich_ask(message: str) -> str:
    return Prompt.ask(escape(message), console=console, default="", show_default=False)


class InputCollector:
    """Drives the questionnaire and builds ``RawAnswers``.

    Args:
        ask: Callable that shows a prompt and returns the user's reply.
            Defaults to ``rich.prompt.Prompt.ask`` on the shared console.
        questions: The ordered questions to ask.
    """

    def __init__(
        self,
        ask: Callable[[str], str] | None = None,
        questions: tuple[Question, ...] = QUESTIONNAIRE,
    ) -> None:
        self.ask = ask or _rich_ask
        self.questions = questions

    def ask_one(self, question: Question) -> str:
        """Ask *question* until a valid answer is given."""
        while True:
            answer = self.ask(question.message) or ""
            if question.strip:
                answer = answer.strip()
            error = question.validate(answer) if question.validate else None
            if error is None:
                return answer
            print_error(error)

    def collect(self) -> RawAnswers:
        """Ask every question in order and return the answers."""
        answers = {question.field: self.ask_one(question) for question in self.questions}
        return RawAnswers(**answers)
