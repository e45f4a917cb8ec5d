"""
Static content used when a live source fails or returns malformed data.
"""

from typing import List

from ..models import NewsItem, Quote, TriviaQuestion

FALLBACK_QUOTE = {
    "text": "The only way to do great work is to love what you do.",
    "author": "Steve Jobs",
}

FALLBACK_TRIVIA = {
    "number": 1,
    "question": "What is the capital of France?",
    "category": "Geography",
    "difficulty": "easy",
    "options": ["London", "Berlin", "Paris", "Madrid"],
    "correct_answer": "Paris",
}

# Used to pad a short language model response up to five items
FILLER_NEWS_ITEM = {
    "headline": "AI Development Continues Across Multiple Sectors",
    "summary": "The artificial intelligence industry continues to evolve with new breakthroughs in machine learning, natural language processing, and computer vision applications.",
    "why_it_matters": "These advances are transforming how businesses operate and how people interact with technology.",
}

FALLBACK_AI_NEWS = [
    {
        "headline": "AI Models Achieve New Benchmarks in Reasoning Tasks",
        "summary": "Latest AI systems demonstrate improved performance on complex reasoning challenges. Models show enhanced ability to solve multi-step problems and provide more accurate explanations for their conclusions.",
        "why_it_matters": "Better reasoning capabilities bring AI closer to handling real-world business and scientific challenges.",
    },
    {
        "headline": "Enterprise AI Adoption Accelerates Globally",
        "summary": "Companies worldwide are integrating AI into core operations, from customer service to product development. Industry reports show significant ROI and productivity gains across sectors.",
        "why_it_matters": "AI is becoming essential infrastructure for competitive businesses in the modern economy.",
    },
    {
        "headline": "AI Safety Research Receives Increased Funding",
        "summary": "Major tech companies and research institutions are expanding AI safety teams. Focus areas include alignment, interpretability, and developing frameworks for responsible AI deployment.",
        "why_it_matters": "Ensuring AI systems remain safe and beneficial is critical as they become more powerful and widespread.",
    },
    {
        "headline": "Open Source AI Community Delivers Major Updates",
        "summary": "Community-developed AI models continue to challenge proprietary systems with competitive performance. New tools make it easier for developers to build and deploy AI applications without vendor lock-in.",
        "why_it_matters": "Democratized AI access enables innovation from startups and researchers worldwide.",
    },
    {
        "headline": "Global AI Governance Frameworks Take Shape",
        "summary": "Governments and international bodies advance AI policy discussions. New regulations aim to balance innovation with safety, privacy, and ethical considerations.",
        "why_it_matters": "Clear regulatory frameworks help guide responsible AI development and build public trust.",
    },
]


def fallback_quote() -> Quote:
    return Quote(**FALLBACK_QUOTE)


def fallback_trivia() -> List[TriviaQuestion]:
    question = dict(FALLBACK_TRIVIA, options=list(FALLBACK_TRIVIA["options"]))
    return [TriviaQuestion(**question)]


def filler_news_item() -> NewsItem:
    return NewsItem(**FILLER_NEWS_ITEM)


def fallback_ai_news() -> List[NewsItem]:
    return [NewsItem(**item) for item in FALLBACK_AI_NEWS]
