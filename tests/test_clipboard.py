"""Tests for clipboard export."""

import pyperclip
import pytest

from jsonfold.clipboard import ClipboardError, copy_document, write_clipboard
from jsonfold.document import build_document, export_document


class TestWriteClipboard:
    """Tests for write_clipboard."""

    def test_writes_text(self, mock_clipboard):
        write_clipboard("abc")
        mock_clipboard.assert_called_once_with("abc")

    def test_backend_failure_raises_clipboard_error(self, mock_clipboard):
        mock_clipboard.side_effect = pyperclip.PyperclipException("no backend")
        with pytest.raises(ClipboardError, match="no backend"):
            write_clipboard("abc")


class TestCopyDocument:
    """Tests for copy_document."""

    def test_copies_canonical_export(self, mock_clipboard):
        document = build_document("{a: 1} // c")
        notice = copy_document(document)
        assert notice.ok
        assert notice.message == "Copied to clipboard"
        mock_clipboard.assert_called_once_with(export_document(document))

    def test_with_comments_copies_same_text(self, mock_clipboard):
        document = build_document("{a: 1} // c")
        copy_document(document, with_comments=True)
        mock_clipboard.assert_called_once_with('{\n    "a": 1\n}')

    def test_failure_is_reported_not_raised(self, mock_clipboard):
        mock_clipboard.side_effect = pyperclip.PyperclipException("no backend")
        document = build_document("[1]")
        notice = copy_document(document)
        assert not notice.ok
        assert notice.message == "Copy failed"
        assert document.is_parsed

    @pytest.mark.parametrize("text", ["", "{a: }"])
    def test_nothing_to_copy(self, mock_clipboard, text):
        notice = copy_document(build_document(text))
        assert not notice.ok
        assert notice.message == "Nothing to copy"
        mock_clipboard.assert_not_called()
