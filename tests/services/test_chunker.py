import pytest

from crawldigest.services.chunker import chunk_text


def _sample_text():
    words = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta"]
    paragraphs = []
    for p in range(12):
        sentences = []
        for s in range(p % 5 + 1):
            body = " ".join(words[(p + s + i) % len(words)] for i in range(s + 3))
            sentences.append(body.capitalize() + ("." if s % 2 else "!"))
        if p == 7:
            sentences.append("y" * 60 + ".")
        paragraphs.append(" ".join(sentences))
    return "\n\n".join(paragraphs)


def _squash(s):
    return "".join(s.split())


def test_text_that_fits_is_returned_unchanged():
    text = "  short text\n\nwith paragraphs  "
    assert chunk_text(text, 100) == [text]


def test_empty_text_is_a_single_empty_chunk():
    assert chunk_text("", 10) == [""]


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_ceiling_rejected(size):
    with pytest.raises(ValueError):
        chunk_text("abc", size)


def test_paragraphs_are_packed_greedily():
    text = "aaaa\n\nbbbb\n\ncccc"
    assert chunk_text(text, 10) == ["aaaa\n\nbbbb", "cccc"]


def test_oversized_paragraph_falls_back_to_sentences():
    text = "Intro\n\nOne two. Three four! Five six?"
    assert chunk_text(text, 20) == ["Intro", "One two. Three four!", "Five six?"]


def test_oversized_sentence_is_sliced():
    assert chunk_text("x" * 25, 10) == ["x" * 10, "x" * 10, "x" * 5]


@pytest.mark.parametrize("size", [5, 17, 50, 200])
def test_chunks_respect_ceiling_and_preserve_content_in_order(size):
    text = _sample_text()
    chunks = chunk_text(text, size)
    assert all(len(c) <= size for c in chunks)
    assert all(c for c in chunks)
    assert _squash("".join(chunks)) == _squash(text)


def test_single_chunk_when_ceiling_exceeds_text():
    text = _sample_text()
    assert chunk_text(text, len(text)) == [text]
