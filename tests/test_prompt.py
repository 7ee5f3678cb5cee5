import pytest

from blogwriter.prompts.blog import EmptyTopic, TONES, build_prompt


def test_prompt_substitutes_fields():
    prompt = build_prompt("Composting at home", "Friendly", "Urban gardeners", 1500)
    assert 'on the topic: "Composting at home"' in prompt
    assert "Keep the tone Friendly" in prompt
    assert "easy to understand for Urban gardeners" in prompt
    assert "Length: ~1500 words." in prompt
    assert prompt.startswith("You are an expert blog writer")
    assert prompt == prompt.strip()


def test_prompt_is_deterministic():
    assert build_prompt("x") == build_prompt("x")


def test_fixed_requirements_present():
    prompt = build_prompt("x")
    for needle in ("meta description under 160 characters", "H2/H3 subheadings",
                   "3 SEO-friendly FAQs at the end using H3 tags"):
        assert needle in prompt


@pytest.mark.parametrize("topic", ["", "   ", "\n\t"])
def test_blank_topic_rejected(topic):
    with pytest.raises(EmptyTopic):
        build_prompt(topic)


def test_tones():
    assert TONES[0] == "Informative"
    assert len(TONES) == 7
