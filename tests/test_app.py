import string

import pytest

from kglab.app import main, vk_from_symbol
from kglab.light import KEY_F, KEY_G


def test_g_and_f_map_to_light_keys():
    assert vk_from_symbol(ord("g")) == KEY_G
    assert vk_from_symbol(ord("f")) == KEY_F


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_letters_map_to_upper_case_codes(letter):
    assert vk_from_symbol(ord(letter)) == ord(letter.upper())


@pytest.mark.parametrize("digit", string.digits)
def test_digits_keep_their_code(digit):
    assert vk_from_symbol(ord(digit)) == ord(digit)


def test_space_maps_to_space():
    assert vk_from_symbol(ord(" ")) == ord(" ")


@pytest.mark.parametrize("symbol", [0xFF51, 0xFFE1, ord("[")])
def test_unmapped_symbols_give_none(symbol):
    assert vk_from_symbol(symbol) is None


def test_main_rejects_non_positive_size():
    with pytest.raises(SystemExit) as info:
        main(["--width", "0"])
    assert info.value.code == 2