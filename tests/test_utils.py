import os
import string

import pytest

from doxybook import utils


def test_title_upper_cases_first_letter_only():
    result = utils.title("hello world")
    assert result[0] == "H"
    assert result[1:] == "hello world"[1:]


def test_title_empty_and_non_letter():
    assert utils.title("") == ""
    assert utils.title("1abc") == "1abc"


def test_to_lower_ascii():
    text = "MiXeD Case 123"
    assert utils.to_lower(text) == text.lower()


def test_to_lower_leaves_non_ascii():
    assert utils.to_lower("\u00c9") == "\u00c9"


def test_safe_anchor_id():
    result = utils.safe_anchor_id("Engine::Audio Manager")
    assert "::" not in result
    assert " " not in result
    assert result == utils.to_lower(result)
    assert result == "engineaudio-manager"


def test_date_formats_current_year():
    year = utils.date("%Y")
    assert len(year) == 4 and year.isdigit()
    assert utils.date("literal") == "literal"


def test_strip_namespace():
    assert utils.strip_namespace("Engine::Utils::Path") == "Path"


def test_strip_namespace_ignores_colons_in_brackets():
    text = "Foo<std::string>"
    assert utils.strip_namespace(text) == text
    assert utils.strip_namespace("A::Foo<B::C>") == "Foo<B::C>"


def test_strip_namespace_without_colon():
    assert utils.strip_namespace("plain") == "plain"


def test_strip_anchor_removes_hash():
    refid = "classEngine_1_1Audio"
    anchored = refid + "_1" + "a" * 40
    assert utils.strip_anchor(anchored) == refid


@pytest.mark.parametrize("length", [10, 33, 68])
def test_strip_anchor_keeps_other_lengths(length):
    text = "group__Engine_" + "b" * length
    assert utils.strip_anchor(text) == text


def test_strip_anchor_ignores_uppercase():
    text = "x_" + "A" * 40
    assert utils.strip_anchor(text) == text


def test_extract_qualified_name():
    definition = "void Engine::Audio::AudioManager::play"
    assert utils.extract_qualified_name_from_function_definition(definition) == (
        "Engine::Audio::AudioManager::play"
    )


def test_extract_qualified_name_operator():
    definition = "bool Foo::operator==(const Foo&)"
    result = utils.extract_qualified_name_from_function_definition(definition)
    assert definition.endswith(result)
    assert " " not in result


def test_extract_qualified_name_without_match():
    assert utils.extract_qualified_name_from_function_definition("single") == "single"


def test_escape_each_character():
    assert utils.escape("<") == "&lt;"
    assert utils.escape(">") == "&gt;"
    assert utils.escape("*") == "&#42;"
    assert utils.escape("_") == "&#95;"


def test_escape_plain_text_unchanged():
    text = "plain text 123"
    assert utils.escape(text) == text


def test_escape_mixed_text():
    assert utils.escape("a<b>*c_d") == "a&lt;b&gt;&#42;c&#95;d"


def test_split_two_tokens():
    assert utils.split("a,b", ",") == ["a", "b"]


def test_split_later_tokens_use_offset_length():
    assert utils.split("a,b,c", ",") == ["a", "b,c", "c"]


def test_split_without_delimiter():
    assert utils.split("abc", ",") == ["abc"]


def test_split_trailing_and_leading_delimiter():
    assert utils.split("a,", ",") == ["a"]
    assert utils.split(",a", ",") == ["", "a"]


def test_split_empty_delimiter_raises():
    with pytest.raises(ValueError):
        utils.split("abc", "")


def test_create_directory(tmp_path):
    target = tmp_path / "out"
    utils.create_directory(target)
    assert target.is_dir()
    utils.create_directory(target)
    assert target.is_dir()
    if os.name == "posix":
        assert (target.stat().st_mode & 0o700) == 0o700


def test_create_directory_missing_parent(tmp_path):
    with pytest.raises(FileNotFoundError):
        utils.create_directory(tmp_path / "missing" / "child")


def test_create_directory_over_file(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    with pytest.raises(FileExistsError):
        utils.create_directory(target)


def test_title_only_ascii_first_letter():
    for letter in string.ascii_lowercase:
        assert utils.title(letter) == letter.upper()