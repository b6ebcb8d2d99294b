import pytest

from algolab.kmp import DEFAULT_PATTERN, find_in_file, find_pattern, main, prefix_table


def test_prefix_table_repeated_char():
    assert prefix_table("aaaa") == [0, 1, 2, 3]


def test_prefix_table_classic_example():
    assert prefix_table("ababaca") == [0, 0, 1, 2, 3, 0, 1]


def test_prefix_table_empty():
    assert prefix_table("") == []


def test_prefix_table_no_repeats_is_all_zero():
    pattern = "abcdef"
    assert prefix_table(pattern) == [0] * len(pattern)


def test_overlapping_matches():
    assert find_pattern("aa", "aaaa") == [0, 1, 2]


def test_no_match():
    assert find_pattern(DEFAULT_PATTERN, "nothing here") == []


def test_matches_are_genuine_and_sorted():
    pattern = "abab"
    line = "xyabababzabab"
    result = find_pattern(pattern, line, prefix_table(pattern))
    assert result
    assert result == sorted(result)
    assert all(line[i : i + len(pattern)] == pattern for i in result)


def test_table_is_optional():
    pattern = "abc"
    line = "zzabczabc"
    assert find_pattern(pattern, line) == find_pattern(pattern, line, prefix_table(pattern))


def test_empty_pattern_raises():
    with pytest.raises(ValueError):
        find_pattern("", "abc")


def test_find_in_file_concatenates(tmp_path):
    prefix = "zz"
    path = tmp_path / "code.txt"
    path.write_text(f"{prefix}{DEFAULT_PATTERN}\nnothing\n{DEFAULT_PATTERN}\n", encoding="utf-8")
    assert find_in_file(path, DEFAULT_PATTERN) == f"{len(prefix)}0"


def test_find_in_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_in_file(tmp_path / "missing.txt", DEFAULT_PATTERN)


def test_main_prints_code(tmp_path, capsys):
    path = tmp_path / "code.txt"
    path.write_text("ab\nxab\n", encoding="utf-8")
    assert main([str(path), "--pattern", "ab"]) == 0
    assert capsys.readouterr().out == "01\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Error not open file" in capsys.readouterr().err