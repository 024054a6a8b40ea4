import fitz

from bujo_book import cli
from bujo_book.cli import main


def test_dry_run_reports_page_count(capsys):
    assert main(["--paper-size", "A4", "--title", "Test Journal", "--dry-run"]) == 0

    out = capsys.readouterr().out
    assert "DRY RUN COMPLETE" in out
    assert "test_journal_journal_book.pdf" in out
    assert "Pages: 66" in out


def test_unsupported_paper_size_exits_with_error(capsys, tmp_path):
    assert main(["--paper-size", "B5", "--output-dir", str(tmp_path)]) == 1

    assert "Unsupported paper size" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_generates_pdf(tmp_path, capsys):
    assert main(["--paper-size", "A6", "--color-scheme", "monochrome",
                 "--output-dir", str(tmp_path)]) == 0

    assert (tmp_path / "my_bullet_journal_journal_book.pdf").is_file()
    out = capsys.readouterr().out
    assert "GENERATION COMPLETE" in out
    assert "Pages: 66" in out


def test_banner_reports_pages_in_saved_file(tmp_path, monkeypatch, capsys):
    def write_short_book(paper_size, journal, surface, output_dir):
        path = tmp_path / journal.file_name
        doc = fitz.open()
        doc.new_page()
        doc.new_page()
        doc.save(str(path))
        doc.close()
        return path

    monkeypatch.setattr(cli, "create_journal_book", write_short_book)

    assert main(["--output-dir", str(tmp_path)]) == 0
    assert "Pages: 2" in capsys.readouterr().out
