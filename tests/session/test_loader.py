import logging

import pytest

from dheap.session.loader import ArrayFileError, is_number, parse_array, read_arrays


@pytest.fixture
def write_file(tmp_path):
    def _write(text):
        path = tmp_path / "arrays.txt"
        path.write_text(text)
        return path
    return _write


class TestParsing:
    @pytest.mark.parametrize("token", ["0", "42", "-7", "+3", "0012"])
    def test_is_number(self, token):
        assert is_number(token)

    @pytest.mark.parametrize("token", ["", "-", "1.5", "abc", "4-2", "1e3"])
    def test_is_not_number(self, token):
        assert not is_number(token)

    def test_parse_array(self):
        assert parse_array("3 1  4\t-1 5\n") == [3, 1, 4, -1, 5]
        assert parse_array("") == []

    def test_parse_array_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_array("1 two 3")


class TestReadArrays:
    def test_read_arrays(self, write_file):
        path = write_file("3 1 4 1 5 9 2 6\n10 20\n-1\n")
        assert read_arrays(path) == [[3, 1, 4, 1, 5, 9, 2, 6], [10, 20], [-1]]

    def test_blank_lines_are_skipped(self, write_file):
        path = write_file("\n1 2\n   \n3\n")
        assert read_arrays(str(path)) == [[1, 2], [3]]

    def test_max_arrays(self, write_file, caplog):
        path = write_file("".join(f"{i}\n" for i in range(15)))
        with caplog.at_level(logging.WARNING, logger="dheap"):
            arrays = read_arrays(path)
        assert "only the first 10 arrays are used" in caplog.text
        assert "ignoring line 11 onwards" in caplog.text
        assert len(arrays) == 10
        assert arrays[-1] == [9]
        assert read_arrays(path, max_arrays=3) == [[0], [1], [2]]

    def test_line_too_long(self, write_file):
        path = write_file("1 2\n" + "1 " * 20 + "\n")
        with pytest.raises(ArrayFileError) as excinfo:
            read_arrays(path, max_line_length=10)
        assert excinfo.value.lineno == 2

    def test_invalid_token(self, write_file):
        path = write_file("1 2\n3 x 4\n")
        with pytest.raises(ArrayFileError) as excinfo:
            read_arrays(path)
        assert excinfo.value.lineno == 2
        assert "line 2" in str(excinfo.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArrayFileError):
            read_arrays(tmp_path / "missing.txt")

    def test_max_arrays_not_reached(self, write_file, caplog):
        path = write_file("1\n2\n")
        with caplog.at_level(logging.WARNING, logger="dheap"):
            read_arrays(path)
        assert "only the first" not in caplog.text

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1 2 \xff\xfe 3\n")
        with pytest.raises(ArrayFileError) as excinfo:
            read_arrays(path)
        assert "cannot decode" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
