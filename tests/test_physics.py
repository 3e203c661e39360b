import pytest

from astrocelerate.physics import FrameType, State

A = State((1.5, -2.0, 3.0), (0.25, 4.0, -1.0))
B = State((10.0, 20.0, 30.0), (-3.0, 0.5, 8.0))


def test_add_then_subtract_round_trip():
    assert (A + B) - B == A


def test_addition_commutes():
    assert A + B == B + A


def test_scalar_multiplication_matches_repeated_addition():
    assert A * 2 == A + A
    assert 2 * A == A * 2


def test_division_undoes_multiplication():
    assert (A * 4.0) / 4.0 == A


def test_zero_state_is_additive_identity():
    assert A + State() == A
    assert A - A == State()


def test_division_by_zero_raises():
    assert A / 2 == A * 0.5
    with pytest.raises(ZeroDivisionError):
        A / 0


def test_multiply_by_non_number_is_type_error():
    assert A * 1 == A
    with pytest.raises(TypeError):
        A * "x"


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        State((1.0, 2.0), (0.0, 0.0, 0.0))


def test_frame_types_distinct():
    assert FrameType(0) is FrameType.INERTIAL
    assert {FrameType(f.value) for f in FrameType} == set(FrameType)
    assert len(set(FrameType)) == 4