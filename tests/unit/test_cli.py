"""Unit tests for the interactive console."""

import io

import pytest
from mini_search_engine.cli import (
    FAREWELL,
    PROMPT,
    format_results,
    format_stats,
    main,
    run_interactive,
)
from mini_search_engine.core.engine import SearchEngine
from mini_search_engine.loader import load_batch_file, read_batch_file
from mini_search_engine.models.response import SearchResult
from mini_search_engine.sample_data import load_sample_documents


class TestFormatting:
    """Test cases for console rendering."""

    def test_format_results(self):
        """Test the result block layout."""
        results = [
            SearchResult(document_id=3, score=4.828314, title="First", snippet="snip one", url="https://a"),
            SearchResult(document_id=1, score=1.0, title="Second", snippet="snip two", url=""),
        ]

        text = format_results(results, "query text")

        assert '=== Results for: "query text" ===' in text
        assert "Found 2 results" in text
        assert "[1] First" in text
        assert "    URL: https://a" in text
        assert "    snip one" in text
        assert "    Score: 4.828" in text
        assert "[2] Second" in text
        assert "    Score: 1.000" in text
        assert text.count("URL:") == 1

    def test_format_no_results(self):
        """Test rendering an empty result list."""
        assert "Found 0 results" in format_results([], "nothing")

    def test_format_stats(self):
        """Test the statistics block."""
        text = format_stats({"document_count": 5, "unique_term_count": 42})

        assert "=== Search Engine Statistics ===" in text
        assert "Indexed documents: 5" in text
        assert "Unique terms: 42" in text


class TestInteractiveLoop:
    """Test cases for the read-query loop."""

    @pytest.fixture
    def engine(self):
        """Create a search engine loaded with the sample documents."""
        engine = SearchEngine()
        load_sample_documents(engine)
        return engine

    def test_quit(self, engine):
        """Test that 'quit' ends the loop."""
        output = io.StringIO()
        answered = run_interactive(engine, io.StringIO("python\nquit\njava\n"), output)

        assert answered == 1
        text = output.getvalue()
        assert PROMPT in text
        assert "[1] Machine Learning with Python" in text
        assert "URL: https://example.com/ml-python" in text
        assert "Score: 4.828" in text
        assert text.rstrip().endswith(FAREWELL)

    def test_exit(self, engine):
        """Test that 'exit' ends the loop."""
        assert run_interactive(engine, io.StringIO("exit\npython\n"), io.StringIO()) == 0

    def test_end_of_input(self, engine):
        """Test that end of input ends the loop."""
        output = io.StringIO()
        assert run_interactive(engine, io.StringIO("python\ndata"), output) == 2
        assert FAREWELL in output.getvalue()

    def test_empty_lines_ignored(self, engine):
        """Test that blank lines are not queries."""
        output = io.StringIO()
        assert run_interactive(engine, io.StringIO("\n\npython\n"), output) == 1
        assert output.getvalue().count("=== Results for") == 1

    def test_max_results(self, engine):
        """Test the per-query result limit."""
        output = io.StringIO()
        run_interactive(engine, io.StringIO("search data programming language\n"), output, max_results=1)

        assert "Found 1 results" in output.getvalue()


class TestMain:
    """Test cases for the console entry point."""

    def test_sample_documents(self):
        """Test starting with the built-in samples."""
        output = io.StringIO()
        status = main([], input_stream=io.StringIO("python\nquit\n"), output_stream=output)

        assert status == 0
        text = output.getvalue()
        assert "Indexed documents: 5" in text
        assert "Machine Learning with Python" in text

    def test_data_file(self, tmp_path):
        """Test loading documents from a batch file."""
        data_file = tmp_path / "docs.txt"
        data_file.write_text(
            "Cats|Cats purr loudly|https://example.com/cats\n"
            "Dogs|Dogs bark loudly\n"
            "not a document\n",
            encoding="utf-8"
        )
        output = io.StringIO()

        status = main(["--file", str(data_file)], input_stream=io.StringIO("purr\n"), output_stream=output)

        assert status == 0
        text = output.getvalue()
        assert "Indexed documents: 2" in text
        assert "[1] Cats" in text

    def test_missing_data_file(self, tmp_path, capsys):
        """Test that a missing file is reported and fails."""
        missing = tmp_path / "missing.txt"

        status = main(["--file", str(missing)], input_stream=io.StringIO(""), output_stream=io.StringIO())

        assert status == 1
        assert "cannot open" in capsys.readouterr().err


class TestBatchFile:
    """Test cases for reading batch files from disk."""

    def test_only_newline_breaks_lines(self, tmp_path):
        """Test that form feed and other line separators stay inside a line."""
        data_file = tmp_path / "docs.txt"
        data_file.write_bytes(
            "T1|plain|u1\r\n"
            "T2|form\x0cfeed|u2\n"
            "T3|next\x85line sep|u3\n".encode("utf-8")
        )

        assert read_batch_file(data_file) == [
            "T1|plain|u1\r",
            "T2|form\x0cfeed|u2",
            "T3|next\x85line sep|u3",
        ]

    def test_load_keeps_documents_whole(self, tmp_path):
        """Test that a document with a form feed loads as one document."""
        data_file = tmp_path / "docs.txt"
        data_file.write_bytes("T1|plain|u1\r\nT2|form\x0cfeed|u2\n".encode("utf-8"))
        engine = SearchEngine()

        result = load_batch_file(engine, data_file)

        assert result.added == 2
        assert result.skipped == 0
        assert engine.get_document(0).url == "u1"
        assert engine.get_document(1).content == "form\x0cfeed"
        assert engine.get_document(1).url == "u2"

    def test_missing_final_newline(self, tmp_path):
        """Test that the last line does not need a terminator."""
        data_file = tmp_path / "docs.txt"
        data_file.write_bytes(b"A|B|C\nD|E")

        assert read_batch_file(data_file) == ["A|B|C", "D|E"]

    def test_empty_file(self, tmp_path):
        """Test that an empty file has no lines."""
        data_file = tmp_path / "docs.txt"
        data_file.write_bytes(b"")

        assert read_batch_file(data_file) == []
