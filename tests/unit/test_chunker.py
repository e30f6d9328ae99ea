"""Unit tests for section-aware chunking."""

import pytest

from contextmd.models.chunk import Chunk
from contextmd.models.config import ContextConfig
from contextmd.processing.chunker import (
    build_chunks,
    detect_section_header,
    split_into_sections,
    split_into_windows,
    window_words,
)


def _words(n: int) -> list[str]:
    return [f"w{i}" for i in range(n)]


@pytest.fixture
def sample_text():
    return "# About\nI like Rust and Go.\n# Hobbies\nI enjoy chess."


class TestDetectSectionHeader:
    def test_detects_h1(self):
        assert detect_section_header("# About") == "About"

    def test_detects_h6(self):
        assert detect_section_header("###### Deep heading") == "Deep heading"

    def test_strips_trailing_whitespace(self):
        assert detect_section_header("## Economic Outlook   ") == "Economic Outlook"

    def test_requires_whitespace_after_hashes(self):
        assert detect_section_header("#hashtag") is None

    def test_rejects_seven_hashes(self):
        assert detect_section_header("####### Too deep") is None

    def test_returns_none_for_regular_text(self):
        assert detect_section_header("I like # signs in the middle") is None

    def test_header_must_start_the_line(self):
        assert detect_section_header("  # Indented") is None


class TestSplitIntoSections:
    def test_splits_on_headers(self, sample_text):
        sections = split_into_sections(sample_text)
        assert [s.title for s in sections] == ["About", "Hobbies"]

    def test_header_line_is_part_of_section_text(self, sample_text):
        sections = split_into_sections(sample_text)
        assert sections[0].text.startswith("# About")
        assert "I like Rust and Go." in sections[0].text

    def test_no_headers_is_one_unnamed_section(self):
        sections = split_into_sections("Just a plain note.\nWith two lines.")
        assert len(sections) == 1
        assert sections[0].title is None

    def test_text_before_first_header_is_unnamed(self):
        sections = split_into_sections("intro line\n# A\nbody")
        assert [s.title for s in sections] == [None, "A"]

    def test_blank_lines_before_header_are_dropped(self):
        sections = split_into_sections("\n\n   \n# A\nbody")
        assert [s.title for s in sections] == ["A"]

    def test_empty_text(self):
        assert split_into_sections("") == []


class TestWindowWords:
    def test_exact_count_for_1200_words(self):
        windows = window_words(_words(1200), chunk_size=500, chunk_overlap=50)
        # step = 450 → windows start at 0, 450, 900
        assert len(windows) == 3
        assert windows[0].split()[0] == "w0"
        assert windows[1].split()[0] == "w450"
        assert windows[2].split()[0] == "w900"

    def test_window_lengths_for_1200_words(self):
        windows = window_words(_words(1200), chunk_size=500, chunk_overlap=50)
        assert [len(w.split()) for w in windows] == [500, 500, 300]
        assert windows[-1].split()[-1] == "w1199"

    def test_consecutive_windows_overlap_exactly(self):
        windows = window_words(_words(2000), chunk_size=100, chunk_overlap=10)
        for left, right in zip(windows, windows[1:]):
            assert left.split()[-10:] == right.split()[:10]

    def test_short_input_is_one_window(self):
        assert window_words(["only", "three", "words"], 500, 50) == ["only three words"]

    def test_zero_overlap(self):
        windows = window_words(_words(10), chunk_size=5, chunk_overlap=0)
        assert windows == ["w0 w1 w2 w3 w4", "w5 w6 w7 w8 w9"]

    def test_final_partial_window_is_emitted(self):
        windows = window_words(_words(11), chunk_size=5, chunk_overlap=0)
        assert windows[-1] == "w10"

    def test_overlap_equal_to_size_rejected(self):
        with pytest.raises(ValueError):
            window_words(_words(10), chunk_size=5, chunk_overlap=5)

    def test_negative_overlap_rejected(self):
        with pytest.raises(ValueError):
            window_words(_words(10), chunk_size=5, chunk_overlap=-1)

    def test_empty_words(self):
        assert window_words([], 5, 1) == []


class TestSplitIntoWindows:
    def test_pairs_carry_section_titles(self, sample_text):
        assert split_into_windows(sample_text) == [
            ("# About I like Rust and Go.", "About"),
            ("# Hobbies I enjoy chess.", "Hobbies"),
        ]

    def test_whitespace_is_collapsed(self):
        assert split_into_windows("a   b\n\n\tc") == [("a b c", None)]

    def test_windows_do_not_cross_sections(self):
        text = "# One\n" + " ".join(_words(8)) + "\n# Two\nshort"
        pairs = split_into_windows(text, chunk_size=5, chunk_overlap=1)
        titles = [t for _, t in pairs]
        assert titles[-1] == "Two"
        assert all("short" not in text for text, title in pairs if title == "One")


class TestBuildChunks:
    def test_produces_chunks(self, sample_text):
        chunks = build_chunks(sample_text)
        assert len(chunks) == 2
        assert all(isinstance(c, Chunk) for c in chunks)

    def test_sequential_indices_across_sections(self):
        text = "# One\n" + " ".join(_words(12)) + "\n# Two\n" + " ".join(_words(12))
        chunks = build_chunks(text, ContextConfig(chunk_size=5, chunk_overlap=1))
        assert [c.chunk_index for c in chunks] == list(range(len(chunks)))

    def test_chunks_have_keywords(self, sample_text):
        chunks = build_chunks(sample_text)
        assert chunks[0].keywords == ("like", "rust")
        assert chunks[1].keywords == ("hobbies", "enjoy", "chess")

    def test_section_titles(self, sample_text):
        chunks = build_chunks(sample_text)
        assert [c.section_title for c in chunks] == ["About", "Hobbies"]

    def test_deterministic(self, sample_text):
        assert build_chunks(sample_text) == build_chunks(sample_text)

    def test_ids_are_stable_and_unique(self, sample_text):
        first = [c.id for c in build_chunks(sample_text)]
        second = [c.id for c in build_chunks(sample_text)]
        assert first == second
        assert len(set(first)) == len(first)

    def test_chunks_have_nonempty_text(self):
        chunks = build_chunks("# Empty\n\n# Full\ncontent here")
        for chunk in chunks:
            assert chunk.text.strip()

    def test_respects_keyword_cap(self):
        text = " ".join(f"keyword{i:02d}" for i in range(40))
        chunks = build_chunks(text, ContextConfig(max_keywords=7))
        assert len(chunks[0].keywords) == 7

    def test_blank_document_has_no_chunks(self):
        assert build_chunks("   \n\n  ") == []
