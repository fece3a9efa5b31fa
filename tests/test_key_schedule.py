import pytest

from rijndael_blocks.key_schedule import expand_key, rot_word, sub_word

KEY_128 = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
EXPECTED_128 = [
    0x2B7E1516, 0x28AED2A6, 0xABF71588, 0x09CF4F3C, 0xA0FAFE17, 0x88542CB1, 0x23A33939, 0x2A6C7605,
    0xF2C295F2, 0x7A96B943, 0x5935807A, 0x7359F67F, 0x3D80477D, 0x4716FE3E, 0x1E237E44, 0x6D7A883B,
    0xEF44A541, 0xA8525B7F, 0xB671253B, 0xDB0BAD00, 0xD4D1C6F8, 0x7C839D87, 0xCAF2B8BC, 0x11F915BC,
    0x6D88A37A, 0x110B3EFD, 0xDBF98641, 0xCA0093FD, 0x4E54F70E, 0x5F5FC9F3, 0x84A64FB2, 0x4EA6DC4F,
    0xEAD27321, 0xB58DBAD2, 0x312BF560, 0x7F8D292F, 0xAC7766F3, 0x19FADC21, 0x28D12941, 0x575C006E,
    0xD014F9A8, 0xC9EE2589, 0xE13F0CC8, 0xB6630CA6,
]

KEY_192 = bytes.fromhex("8e73b0f7da0e6452c810f32b809079e562f8ead2522c6b7b")
EXPECTED_192 = [
    0x8E73B0F7, 0xDA0E6452, 0xC810F32B, 0x809079E5, 0x62F8EAD2, 0x522C6B7B, 0xFE0C91F7, 0x2402F5A5,
    0xEC12068E, 0x6C827F6B, 0x0E7A95B9, 0x5C56FEC2, 0x4DB7B4BD, 0x69B54118, 0x85A74796, 0xE92538FD,
    0xE75FAD44, 0xBB095386, 0x485AF057, 0x21EFB14F, 0xA448F6D9, 0x4D6DCE24, 0xAA326360, 0x113B30E6,
    0xA25E7ED5, 0x83B1CF9A, 0x27F93943, 0x6A94F767, 0xC0A69407, 0xD19DA4E1, 0xEC1786EB, 0x6FA64971,
    0x485F7032, 0x22CB8755, 0xE26D1352, 0x33F0B7B3, 0x40BEEB28, 0x2F18A259, 0x6747D26B, 0x458C553E,
    0xA7E1466C, 0x9411F1DF, 0x821F750A, 0xAD07D753, 0xCA400538, 0x8FCC5006, 0x282D166A, 0xBC3CE7B5,
    0xE98BA06F, 0x448C773C, 0x8ECC7204, 0x01002202,
]

KEY_256 = bytes.fromhex(
    "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"
)
EXPECTED_256 = [
    0x603DEB10, 0x15CA71BE, 0x2B73AEF0, 0x857D7781, 0x1F352C07, 0x3B6108D7, 0x2D9810A3, 0x0914DFF4,
    0x9BA35411, 0x8E6925AF, 0xA51A8B5F, 0x2067FCDE, 0xA8B09C1A, 0x93D194CD, 0xBE49846E, 0xB75D5B9A,
    0xD59AECB8, 0x5BF3C917, 0xFEE94248, 0xDE8EBE96, 0xB5A9328A, 0x2678A647, 0x98312229, 0x2F6C79B3,
    0x812C81AD, 0xDADF48BA, 0x24360AF2, 0xFAB8B464, 0x98C5BFC9, 0xBEBD198E, 0x268C3BA7, 0x09E04214,
    0x68007BAC, 0xB2DF3316, 0x96E939E4, 0x6C518D80, 0xC814E204, 0x76A9FB8A, 0x5025C02D, 0x59C58239,
    0xDE136967, 0x6CCC5A71, 0xFA256395, 0x9674EE15, 0x5886CA5D, 0x2E2F31D7, 0x7E0AF1FA, 0x27CF73C3,
    0x749C47AB, 0x18501DDA, 0xE2757E4F, 0x7401905A, 0xCAFAAAE3, 0xE4D59B34, 0x9ADF6ACE, 0xBD10190D,
    0xFE4890D1, 0xE6188D0B, 0x046DF344, 0x706C631E,
]


@pytest.mark.parametrize(
    ("key", "expected"),
    [(KEY_128, EXPECTED_128), (KEY_192, EXPECTED_192), (KEY_256, EXPECTED_256)],
    ids=["aes128", "aes192", "aes256"],
)
def test_key_expansion_vectors(key, expected):
    words = expand_key(key)
    assert [int.from_bytes(w, "big") for w in words] == expected


@pytest.mark.parametrize(("length", "count"), [(16, 44), (24, 52), (32, 60)])
def test_expanded_length_and_prefix(length, count):
    key = bytes(range(length))
    words = expand_key(key)
    assert len(words) == count
    assert all(len(w) == 4 for w in words)
    assert b"".join(words[: length // 4]) == key


def test_expand_key_accepts_bytearray():
    assert expand_key(bytearray(KEY_128)) == expand_key(KEY_128)


@pytest.mark.parametrize("length", [0, 8, 15, 17, 20, 31, 33, 64])
def test_expand_key_rejects_bad_length(length):
    with pytest.raises(ValueError):
        expand_key(bytes(length))


def test_rot_word():
    assert rot_word(bytes([1, 2, 3, 4])) == bytes([2, 3, 4, 1])
    assert rot_word(bytes.fromhex("09cf4f3c")) == bytes.fromhex("cf4f3c09")


def test_rot_word_four_times_is_identity():
    word = bytes.fromhex("2b7e1516")
    result = word
    for _ in range(4):
        result = rot_word(result)
    assert result == word


def test_sub_word():
    assert sub_word(bytes(4)) == bytes([0x63] * 4)
    assert sub_word(bytes.fromhex("cf4f3c09")) == bytes.fromhex("8a84eb01")


@pytest.mark.parametrize("length", [0, 3, 5])
def test_word_functions_reject_bad_length(length):
    with pytest.raises(ValueError):
        rot_word(bytes(length))
    with pytest.raises(ValueError):
        sub_word(bytes(length))