"""Deterministic slide generation used when no AI model is available."""
from slidecraft.core.messages import DEFAULT_LOCALE, translate
from slidecraft.models import Slide

# Shorter tokens are treated as filler words
MIN_KEYWORD_LENGTH = 4


def topic_keywords(topic: str) -> list[str]:
    """Whitespace tokens long enough to be used as section names, in order."""
    return [word for word in topic.split() if len(word) >= MIN_KEYWORD_LENGTH]


def generate_demo_slides(topic: str, num_slides: int, locale: str = DEFAULT_LOCALE) -> list[Slide]:
    """
    Build a placeholder deck from the words of the topic.

    The deck is an introduction, ``num_slides - 2`` section slides and a
    conclusion. Requests for fewer than 3 slides still produce the
    introduction and the conclusion, so the result always has at least 2.
    """
    def t(key: str, **params) -> str:
        return translate(key, locale, **params)

    words = topic_keywords(topic)
    keyword = words[0] if words else t("demo.default_keyword")

    slides = [
        Slide(
            title=t("demo.intro_title", keyword=keyword),
            content=[
                t("demo.intro_overview"),
                t("demo.intro_objectives"),
                t("demo.intro_key_points"),
            ],
        )
    ]

    for i in range(1, num_slides - 1):
        word = words[i] if i < len(words) else t("demo.section_default_word")
        slides.append(Slide(
            title=t("demo.section_title", index=i, word=word),
            content=[
                t("demo.section_aspect", index=i),
                t("demo.section_analysis"),
                t("demo.section_examples"),
                t("demo.section_considerations"),
            ],
        ))

    slides.append(Slide(
        title=t("demo.conclusion_title"),
        content=[
            t("demo.conclusion_summary"),
            t("demo.conclusion_next_steps"),
            t("demo.conclusion_questions"),
        ],
    ))

    return slides
