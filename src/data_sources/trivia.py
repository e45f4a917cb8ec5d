"""
Module for fetching multiple-choice trivia questions from Open Trivia DB.
"""

import html
import random
from typing import Any, Dict, List, Optional

import requests

from .base import DataSource
from .fallbacks import fallback_trivia
from ..models import TriviaQuestion

def decode_html(text: Any) -> str:
    """
    Decode HTML entities such as &quot; and &#039; in API text.

    Args:
        text: Raw text from the trivia API

    Returns:
        Plain text with entities resolved
    """
    if text is None:
        return ""
    return html.unescape(str(text))

class TriviaQuestions(DataSource):
    """
    Data source for trivia questions.

    Answers are shuffled per question with a non-cryptographic RNG.
    """

    def __init__(self,
                 api_url: str = "https://opentdb.com/api.php",
                 amount: int = 10,
                 timeout: float = 10.0,
                 rng: Optional[random.Random] = None):
        """
        Initialize the trivia data source.

        Args:
            api_url: Open Trivia DB endpoint
            amount: Number of questions to request
            timeout: HTTP timeout in seconds
            rng: Random generator used for answer shuffling
        """
        super().__init__(name="Trivia Questions", timeout=timeout)
        self.api_url = api_url
        self.amount = amount
        self.rng = rng or random.Random()

    def fetch_data(self) -> List[TriviaQuestion]:
        """
        Fetch and shuffle trivia questions.

        Returns:
            Numbered questions, or a single fallback question on any failure
        """
        params = {"amount": self.amount, "type": "multiple"}
        self.log_fetch_attempt(**params)

        try:
            response = requests.get(self.api_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            results = response.json().get("results") or []

            if not results:
                raise ValueError("Trivia payload has no results")

            questions = [self._build_question(index + 1, raw) for index, raw in enumerate(results)]
            self.log_fetch_success(len(questions))
            return questions

        except Exception as e:
            self.log_fetch_error(e)
            return self.fallback()

    def _build_question(self, number: int, raw: Dict[str, Any]) -> TriviaQuestion:
        """
        Turn one API result into a numbered question with shuffled options.

        Args:
            number: 1-based question number
            raw: Result object from the API

        Returns:
            TriviaQuestion
        """
        correct_answer = decode_html(raw["correct_answer"])
        options = [decode_html(answer) for answer in raw.get("incorrect_answers", [])]
        options.append(correct_answer)
        self.rng.shuffle(options)

        return TriviaQuestion(
            number=number,
            question=decode_html(raw["question"]),
            category=decode_html(raw.get("category")),
            difficulty=raw.get("difficulty", ""),
            options=options,
            correct_answer=correct_answer,
        )

    def fallback(self) -> List[TriviaQuestion]:
        return fallback_trivia()
