import pytest

from ionsym import SymbolToken, UNKNOWN_SID, UNKNOWN_SYMBOL


def test_token_presence():
    assert not UNKNOWN_SYMBOL.is_present
    assert UNKNOWN_SYMBOL.sid == UNKNOWN_SID and UNKNOWN_SYMBOL.text is None
    assert SymbolToken("a").is_present
    assert SymbolToken(None, 7).is_present
    assert SymbolToken(None, 7).has_sid and not SymbolToken("a").has_sid


def test_token_equality_is_structural():
    assert SymbolToken("a", 10) == SymbolToken("a", 10)
    assert SymbolToken("a", 10) != SymbolToken("a", 11)
    assert SymbolToken("a", 10) != SymbolToken("b", 10)
    assert len({SymbolToken("a", 1), SymbolToken("a", 1)}) == 1


def test_token_is_immutable_and_validated():
    tok = SymbolToken("a", 1)
    with pytest.raises(Exception):
        tok.sid = 2  # type: ignore[misc]
    with pytest.raises(ValueError):
        SymbolToken("a", -5)
    with pytest.raises(TypeError):
        SymbolToken(3, 1)  # type: ignore[arg-type]
