TONES = (
    "Informative",
    "Professional",
    "Conversational",
    "Authoritative",
    "Friendly",
    "Playful",
    "Educational",
)

DEFAULT_TONE = "Informative"
DEFAULT_AUDIENCE = "General audience"
DEFAULT_WORD_COUNT = 1000

WORD_COUNT_MIN = 500
WORD_COUNT_MAX = 2000
WORD_COUNT_STEP = 100

BLOG_PROMPT = """\
You are an expert blog writer and SEO strategist.

Write a detailed, SEO-optimized blog post on the topic: "{topic}".
The blog should include:

1. A compelling, SEO-friendly title
2. A meta description under 160 characters
3. A well-structured introduction
4. Clear, concise H2/H3 subheadings
5. Bullet points or numbered lists where useful
6. Relevant keywords naturally integrated
7. Internal links suggestions (optional)
8. A short conclusion
9. 3 SEO-friendly FAQs at the end using H3 tags

Keep the tone {tone} and make the content easy to understand for {audience}.
Avoid fluff. Make it engaging, factual, and informative. Length: ~{word_count} words.
"""


class EmptyTopic(ValueError):
    """Raised when the topic is blank; no request should be issued."""


def build_prompt(topic: str, tone: str = DEFAULT_TONE, audience: str = DEFAULT_AUDIENCE,
                 word_count: int = DEFAULT_WORD_COUNT) -> str:
    if not topic or not topic.strip():
        raise EmptyTopic("A blog topic is required.")
    return BLOG_PROMPT.format(
        topic=topic,
        tone=tone,
        audience=audience,
        word_count=word_count,
    ).strip()
