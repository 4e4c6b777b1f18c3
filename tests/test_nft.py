import pytest

from rgbifaces.names import AssetName, InvalidRString
from rgbifaces.nft import (
    Attachment,
    EmbeddedMedia,
    MediaRegName,
    MediaType,
    MimeChar,
    Nft,
    NftParseError,
    NftSpec,
    OwnedNft,
    ParseMediaTypeError,
    TokenFractions,
    TokenNo,
)
from rgbifaces.por import Outpoint, ProofOfReserves

U64_MAX = (1 << 64) - 1


def _fraction_or_zero(text):
    try:
        return TokenFractions.parse(text)
    except ValueError:
        return TokenFractions.ZERO


def test_owned_fraction_from_str():
    owned_fraction = _fraction_or_zero("1")
    assert owned_fraction.value == 1
    assert f"{owned_fraction}" == "1"


def test_owned_fraction_from_strict_val():
    owned_fraction = TokenFractions.from_strict_val(1)
    assert owned_fraction.value == 1
    assert f"{owned_fraction}" == "1"


def test_owned_fraction_add_assign():
    owned_fraction = _fraction_or_zero("1")
    owned_fraction = owned_fraction.checked_add(TokenFractions.ZERO)
    assert owned_fraction.value == 1
    assert f"{owned_fraction}" == "1"


def test_owned_fraction_add():
    owned = _fraction_or_zero("1").checked_add(TokenFractions.ZERO) or TokenFractions.ZERO
    assert owned.value == 1
    assert f"{owned}" == "1"


def test_owned_fraction_sub():
    owned = _fraction_or_zero("1").checked_sub(_fraction_or_zero("1"))
    assert owned.value == 0
    assert f"{owned}" == "0"


def test_owned_fraction_sub_in_place():
    owned_fraction = _fraction_or_zero("1")
    owned_fraction -= _fraction_or_zero("1")
    assert owned_fraction == TokenFractions(0)
    assert f"{owned_fraction}" == "0"


def test_fractions_checked_overflow_and_underflow():
    assert TokenFractions(U64_MAX).checked_add(1) is None
    assert TokenFractions(0).checked_sub(1) is None


def test_fractions_saturating():
    assert TokenFractions(U64_MAX).saturating_add(5) == TokenFractions(U64_MAX)
    assert TokenFractions(3).saturating_sub(10) == TokenFractions.ZERO
    assert TokenFractions(3).saturating_add(TokenFractions(4)) == TokenFractions(7)


def test_fractions_from_strict_val_out_of_range():
    with pytest.raises(ValueError):
        TokenFractions.from_strict_val(U64_MAX + 1)


def test_fractions_parse_rejects_too_large():
    with pytest.raises(ValueError):
        TokenFractions.parse(str(U64_MAX + 1))
    assert TokenFractions.parse(str(U64_MAX)) == TokenFractions(U64_MAX)


def test_token_no_arithmetic_and_overflow():
    assert TokenNo(7) + TokenNo(3) == TokenNo(10)
    assert TokenNo(7) % 3 == TokenNo(1)
    assert TokenNo(7) // 2 == TokenNo(3)
    with pytest.raises(OverflowError):
        TokenNo((1 << 32) - 1) + 1
    with pytest.raises(OverflowError):
        TokenNo(0) - 1


@pytest.mark.parametrize("text", ["", "-1", " 1", "1.0", "abc", "4294967296"])
def test_token_no_parse_rejects(text):
    with pytest.raises(ValueError):
        TokenNo.parse(text)


def test_token_no_parse_plus_sign():
    assert TokenNo.parse("+42") == TokenNo(42)


def test_mime_char_display():
    assert MimeChar(ord("^")) is MimeChar.CARET
    assert str(MimeChar(ord("a"))) == "a"
    every_char = "".join(str(member) for member in MimeChar)
    name = MediaRegName("x" + every_char)
    assert str(name) == "x!#$&+-.0123456789^_abcdefghijklmnopqrstuvwxyz"


def test_media_reg_name_restrictions():
    assert MediaRegName("vnd.ms-excel") == "vnd.ms-excel"
    with pytest.raises(InvalidRString):
        MediaRegName("Text")
    with pytest.raises(InvalidRString):
        MediaRegName("a" * 65)
    with pytest.raises(InvalidRString):
        MediaRegName("te xt")


def test_media_type_parse_and_display():
    media = MediaType.parse("image/png")
    assert media.ty == "image"
    assert media.subtype == "png"
    assert media.charset is None
    assert str(media) == "image/png"


def test_media_type_wildcard():
    media = MediaType.parse("image/*")
    assert media.subtype is None
    assert str(media) == "image/*"


def test_media_type_parse_errors():
    with pytest.raises(ParseMediaTypeError) as info:
        MediaType.parse("text")
    assert info.value.kind is ParseMediaTypeError.Kind.INVALID_STRUCTURE
    with pytest.raises(ParseMediaTypeError) as info:
        MediaType.parse("Image/png")
    assert info.value.kind is ParseMediaTypeError.Kind.TYPE_NAME
    with pytest.raises(ParseMediaTypeError) as info:
        MediaType.parse("text/plain/x")
    assert info.value.kind is ParseMediaTypeError.Kind.SUBTYPE_NAME


def test_media_type_with_static():
    assert MediaType.with_static("text/plain") == MediaType.parse("text/plain")
    with pytest.raises(ValueError):
        MediaType.with_static("textplain")


def test_media_type_ordering_none_first():
    assert MediaType.parse("image/*") < MediaType.parse("image/png")
    assert MediaType.parse("image/png") < MediaType.parse("text/plain")


def test_media_type_from_strict_val():
    media = MediaType.from_strict_val({"type": "text", "subtype": "plain", "charset": None})
    assert media == MediaType.parse("text/plain")


def test_embedded_media_from_strict_val():
    media = EmbeddedMedia.from_strict_val(
        {"mime": {"type": "text", "subtype": "plain", "charset": None}, "data": b"hello"}
    )
    assert media.data == b"hello"
    assert str(media.mime) == "text/plain"


def test_embedded_media_too_large():
    with pytest.raises(ValueError):
        EmbeddedMedia(MediaType.parse("text/plain"), b"\x00" * 0x10000)


def test_attachment_digest_length():
    mime = MediaType.parse("image/png")
    assert Attachment(mime, b"\x01" * 32).digest == b"\x01" * 32
    with pytest.raises(ValueError):
        Attachment.from_strict_val(
            {"mime": {"type": "image", "subtype": "png", "charset": None}, "digest": b"\x01" * 31}
        )


def test_nft_defaults_and_coercion():
    assert Nft() == Nft(TokenNo(0), TokenFractions(0))
    nft = Nft(3, 10)
    assert nft.token_no == TokenNo(3)
    assert nft.fractions == TokenFractions(10)


def test_owned_nft_parse():
    owned = OwnedNft.parse("1 @ 2".replace(" ", ""))
    assert owned == OwnedNft(2, 1)


def test_owned_nft_parse_errors():
    with pytest.raises(NftParseError) as info:
        OwnedNft.parse("12")
    assert info.value.kind is NftParseError.Kind.WRONG_FORMAT
    with pytest.raises(NftParseError) as info:
        OwnedNft.parse("1 @ x".replace(" ", ""))
    assert info.value.kind is NftParseError.Kind.INVALID_INDEX
    assert info.value.detail == "x"
    with pytest.raises(NftParseError) as info:
        OwnedNft.parse("ABC @ 2".replace(" ", ""))
    assert info.value.kind is NftParseError.Kind.INVALID_FRACTION
    assert str(info.value) == "invalid fraction abc."


def test_nft_spec_from_strict_val():
    txid = bytes(range(32))
    spec = NftSpec.from_strict_val(
        {
            "name": "Picture",
            "embedded": {"mime": {"type": "image", "subtype": "png", "charset": None}, "data": b"\x89PNG"},
            "external": {"mime": {"type": "image", "subtype": None, "charset": None}, "digest": b"\x02" * 32},
            "reserves": {"utxo": {"txid": txid, "vout": 1}, "proof": b"proof"},
        }
    )
    assert spec.name == AssetName("Picture")
    assert spec.embedded.data == b"\x89PNG"
    assert str(spec.external.mime) == "image/*"
    assert spec.reserves == ProofOfReserves(Outpoint(txid, 1), b"proof")


def test_nft_spec_optional_fields_absent():
    spec = NftSpec.from_strict_val(
        {
            "name": None,
            "embedded": {"mime": {"type": "text", "subtype": "plain", "charset": None}, "data": b""},
            "external": None,
            "reserves": None,
        }
    )
    assert spec.name is None
    assert spec.external is None
    assert spec.reserves is None