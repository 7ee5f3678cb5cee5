import pytest
import requests

from blogwriter.llm.base import BaseLLM, NO_RESPONSE
from blogwriter.llm.errors import AuthError
from blogwriter.prompts.blog import EmptyTopic
from blogwriter.writer import FAILURE_MESSAGE, BlogRequest, GeneratedDocument, generate_document


class FakeLLM(BaseLLM):
    model = "fake"

    def __init__(self, result):
        self.result = result
        self.prompts = []

    def generate(self, prompt, **kwargs):
        self.prompts.append(prompt)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def test_generate_document_success():
    llm = FakeLLM("## Intro\nHello **world**")
    doc = generate_document(llm, BlogRequest("Bees", tone="Playful"))
    assert doc.ok
    assert doc.text == "## Intro\nHello **world**"
    assert len(llm.prompts) == 1
    assert "Keep the tone Playful" in llm.prompts[0]
    assert "<strong>world</strong>" in doc.html
    assert doc.blocks == [(2, "Intro"), (0, "Hello **world**")]
    assert doc.filename == "Bees-blog.docx"


@pytest.mark.parametrize("exc", [
    AuthError("403"),
    requests.ConnectionError("offline"),
    ValueError("bad json"),
])
def test_any_call_failure_becomes_fixed_message(exc):
    llm = FakeLLM(exc)
    doc = generate_document(llm, BlogRequest("Bees"))
    assert doc.text == FAILURE_MESSAGE
    assert not doc.ok
    assert type(exc).__name__ in doc.error
    assert len(llm.prompts) == 1  # no retries


def test_placeholder_is_not_an_error():
    doc = generate_document(FakeLLM(NO_RESPONSE), BlogRequest("Bees"))
    assert doc.ok
    assert doc.text == "No response generated."


def test_blank_topic_issues_no_call():
    llm = FakeLLM("unused")
    with pytest.raises(EmptyTopic):
        generate_document(llm, BlogRequest("  "))
    assert llm.prompts == []


def test_document_is_immutable():
    doc = GeneratedDocument(topic="t", text="x")
    with pytest.raises(Exception):
        doc.text = "y"
