import pytest

from philosim.args import UsageError, check_args, usage_text


def test_usage_text_names_program():
    text = usage_text("prog")
    assert text.startswith("Usage: prog NOP WP|TTD\n")
    assert "  NOP - number of philosophers\n" in text
    assert text.endswith("  Either WP or TTD to be given!\n")


def test_check_args_returns_arguments():
    assert check_args(["prog", "3", "-300"]) == ("3", "-300")


@pytest.mark.parametrize(
    "argv",
    [["prog"], ["prog", "2"], ["prog", "2", "3", "4"]],
)
def test_check_args_wrong_count(argv):
    with pytest.raises(UsageError) as info:
        check_args(argv)
    assert info.value.usage == usage_text("prog")


def test_check_args_empty_argv_uses_default_name():
    with pytest.raises(UsageError) as info:
        check_args([])
    assert "Usage: philo NOP WP|TTD" in str(info.value)