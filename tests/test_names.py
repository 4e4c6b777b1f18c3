import pytest

from rgbifaces.names import AssetName, Details, InvalidRString, Ticker


def test_ticker_valid():
    ticker = Ticker("AbC1")
    assert str(ticker) == "AbC1"
    assert ticker == "AbC1"


def test_ticker_case_insensitive():
    assert Ticker("BTC") == Ticker("btc")
    assert hash(Ticker("BTC")) == hash(Ticker("btc"))
    assert len({Ticker("usdt"), Ticker("USDT"), Ticker("UsDt")}) == 1
    assert Ticker("BTC") != Ticker("ETH")
    assert not (Ticker("BTC") != Ticker("bTc"))


@pytest.mark.parametrize("bad", ["", "B", "ABCDEFGHI", "1BTC", "_BTC", "BT-C", "BT C", "BTÇ"])
def test_ticker_invalid(bad):
    with pytest.raises(InvalidRString):
        Ticker(bad)


def test_ticker_length_limits():
    assert Ticker("AB") == "ab"
    assert Ticker("ABCDEFGH") == "abcdefgh"


def test_ticker_invalid_is_value_error():
    with pytest.raises(ValueError):
        Ticker("9")


def test_ticker_from_strict_val():
    assert Ticker.from_strict_val("USDT") == Ticker("usdt")
    with pytest.raises(TypeError):
        Ticker.from_strict_val(123)
    with pytest.raises(InvalidRString):
        Ticker.from_strict_val("X")


def test_asset_name():
    name = AssetName("Tether USD")
    assert name == "Tether USD"
    assert AssetName(" leading space") == " leading space"
    assert AssetName("a" * 40) == "a" * 40


@pytest.mark.parametrize("bad", ["", "a" * 41, "line\nbreak", "caf\u00e9", "tab\tname"])
def test_asset_name_invalid(bad):
    with pytest.raises(InvalidRString):
        AssetName(bad)


def test_asset_name_case_sensitive():
    assert AssetName("Gold") != AssetName("gold")
    assert AssetName.from_strict_val("Gold") == AssetName("Gold")


def test_details_limits():
    assert Details("x" * 255) == "x" * 255
    with pytest.raises(InvalidRString):
        Details("x" * 256)
    with pytest.raises(InvalidRString):
        Details("")


def test_repr_round_trip_value():
    ticker = Ticker("ABC")
    assert repr(ticker) == "Ticker('ABC')"
    assert Ticker(str(ticker)) == ticker