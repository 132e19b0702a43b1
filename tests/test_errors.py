import pytest

from raycube.errors import ErrorCode, MlxError, strerror


def test_strerror_first_and_last():
    assert strerror(ErrorCode.SUCCESS) == "No Errors"
    assert strerror(ErrorCode.STRTOOBIG) == "String is too big to be drawn"


def test_strerror_accepts_plain_int():
    assert strerror(3) == "PNG file is invalid or corrupted"


@pytest.mark.parametrize("code", [-1, 16, 100])
def test_strerror_rejects_unknown_codes(code):
    with pytest.raises(ValueError):
        strerror(code)


def test_every_code_has_a_message():
    messages = [strerror(code) for code in ErrorCode]
    assert len(set(messages)) == len(ErrorCode)
    assert all(messages)


def test_mlx_error_carries_code_and_message():
    err = MlxError(ErrorCode.INVDIM)
    assert err.code is ErrorCode.INVDIM
    assert str(err) == strerror(ErrorCode.INVDIM)


def test_mlx_error_with_detail():
    err = MlxError(ErrorCode.INVPNG, "bad header")
    assert str(err) == strerror(ErrorCode.INVPNG) + ": bad header"
    assert err.detail == "bad header"