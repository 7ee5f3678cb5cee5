from blogwriter.commands.studio import OUTPUT_TAB, SETTINGS_TAB, StudioState
from blogwriter.writer import GeneratedDocument


def test_defaults_and_tab_toggle():
    s = StudioState()
    assert (s.tone, s.audience, s.word_count) == ("Informative", "General audience", 1000)
    assert s.tab == SETTINGS_TAB
    s.toggle_tab()
    assert s.tab == OUTPUT_TAB
    s.toggle_tab()
    assert s.tab == SETTINGS_TAB


def test_unknown_tone_falls_back():
    assert StudioState(tone="Grumpy").tone == "Informative"


def test_tone_cycles_both_ways():
    s = StudioState()
    s.cycle_tone(-1)
    assert s.tone == "Educational"
    s.cycle_tone(1)
    assert s.tone == "Informative"


def test_word_count_stays_on_slider():
    s = StudioState(word_count=1900)
    s.nudge_word_count(3)
    assert s.word_count == 2000
    s.nudge_word_count(-20)
    assert s.word_count == 500


def test_single_request_lifecycle():
    s = StudioState(topic="  Bees  ")
    assert s.has_topic() and s.can_generate() and not s.has_result()

    req = s.begin()
    assert req.topic == "Bees"
    assert s.tab == OUTPUT_TAB
    assert not s.can_generate()
    assert s.output_text().startswith("Creating your premium content")

    s.finish(GeneratedDocument(topic="Bees", text="# Bees"))
    assert s.can_generate() and s.has_result()
    assert s.output_text() == "# Bees"


def test_blank_topic_detected():
    assert not StudioState(topic="   ").has_topic()
