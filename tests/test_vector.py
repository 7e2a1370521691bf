import math

import pytest

from core.vector import Kind, Tuple4, point, vector


class TestKind:
    def test_w_of_zero_is_a_vector(self):
        t = Tuple4(4.3, -4.2, 3.1, 0.0)
        assert t.kind is Kind.VECTOR
        assert t.is_vector and not t.is_point

    def test_w_of_one_is_a_point(self):
        t = Tuple4(4.3, -4.2, 3.1, 1.0)
        assert t.kind is Kind.POINT
        assert t.is_point and not t.is_vector

    def test_other_w_is_raw(self):
        assert Tuple4(1, 2, 3, 0.5).kind is Kind.RAW

    def test_factories(self):
        assert point(4, -4, 3).is_equal(Tuple4(4, -4, 3, 1))
        assert vector(4, -4, 3).is_equal(Tuple4(4, -4, 3, 0))


class TestEquality:
    def test_within_epsilon_is_equal(self):
        assert point(1, 2, 3).is_equal(point(1.000001, 2, 2.999999))

    def test_outside_epsilon_is_not_equal(self):
        assert not point(1, 2, 3).is_equal(point(1.001, 2, 3))

    def test_different_w_is_not_equal(self):
        assert not point(1, 2, 3).is_equal(vector(1, 2, 3))

    def test_reflexive_and_symmetric(self):
        a = vector(0.1, 0.2, 0.3)
        b = vector(0.100004, 0.2, 0.3)
        assert a.is_equal(a)
        assert a.is_equal(b) and b.is_equal(a)


class TestArithmetic:
    def test_point_plus_vector_is_point(self):
        result = point(3, -2, 5) + vector(-2, 3, 1)
        assert result.is_point
        assert result.is_equal(point(1, 1, 6))

    def test_vector_plus_vector_is_vector(self):
        assert (vector(1, 2, 3) + vector(1, 1, 1)).is_equal(vector(2, 3, 4))

    def test_point_plus_point_fails(self):
        with pytest.raises(ValueError):
            point(1, 2, 3) + point(1, 2, 3)

    def test_point_minus_point_is_vector(self):
        result = point(3, 2, 1) - point(5, 6, 7)
        assert result.is_vector
        assert result.is_equal(vector(-2, -4, -6))

    def test_point_minus_vector_is_point(self):
        assert (point(3, 2, 1) - vector(5, 6, 7)).is_equal(point(-2, -4, -6))

    def test_vector_minus_point_fails(self):
        with pytest.raises(ValueError):
            vector(3, 2, 1) - point(5, 6, 7)

    def test_raw_operands_are_allowed(self):
        result = Tuple4(1, 1, 1, 2) - point(1, 1, 1)
        assert result.is_point

    def test_negate(self):
        result = -Tuple4(1, -2, 3, -4)
        assert result.kind is Kind.RAW
        assert (result.x, result.y, result.z, result.w) == (-1, 2, -3, 4)

    def test_negate_vector_stays_vector(self):
        assert (-vector(1, -2, 3)).is_equal(vector(-1, 2, -3))

    @pytest.mark.parametrize("scalar, x, w", [(3.5, 3.5, 3.5), (0.5, 0.5, 0.5), (1, 1, 1)])
    def test_multiply_by_scalar(self, scalar, x, w):
        result = Tuple4(1, -2, 3, 1) * scalar
        assert result.x == pytest.approx(x)
        assert result.w == pytest.approx(w)

    def test_multiply_point_by_one_stays_point(self):
        assert (point(1, 2, 3) * 1).is_point

    def test_scalar_on_the_left(self):
        assert (2 * vector(1, 2, 3)).is_equal(vector(2, 4, 6))

    def test_divide(self):
        assert (vector(1, -2, 3) / 2).is_equal(vector(0.5, -1, 1.5))

    def test_operations_return_new_instances(self):
        v = vector(1, 2, 3)
        v * 2
        assert v.is_equal(vector(1, 2, 3))


class TestVectorOnlyOperations:
    @pytest.mark.parametrize("v, expected", [
        (vector(1, 0, 0), 1.0),
        (vector(0, 0, 1), 1.0),
        (vector(1, 2, 3), math.sqrt(14)),
        (vector(-1, -2, -3), math.sqrt(14)),
    ])
    def test_magnitude(self, v, expected):
        assert v.magnitude() == pytest.approx(expected)

    def test_normalize(self):
        assert vector(4, 0, 0).normalize().is_equal(vector(1, 0, 0))
        n = vector(1, 2, 3).normalize()
        assert n.is_equal(vector(1 / math.sqrt(14), 2 / math.sqrt(14), 3 / math.sqrt(14)))
        assert n.magnitude() == pytest.approx(1.0)

    def test_dot(self):
        assert vector(1, 2, 3).dot(vector(2, 3, 4)) == pytest.approx(20)

    def test_cross(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert a.cross(b).is_equal(vector(-1, 2, -1))
        assert b.cross(a).is_equal(vector(1, -2, 1))

    @pytest.mark.parametrize("operation", [
        lambda p: p.magnitude(),
        lambda p: p.normalize(),
        lambda p: p.dot(vector(1, 0, 0)),
        lambda p: vector(1, 0, 0).dot(p),
        lambda p: p.cross(vector(1, 0, 0)),
    ])
    def test_point_is_rejected(self, operation):
        with pytest.raises(ValueError):
            operation(point(1, 2, 3))


class TestImmutability:
    @pytest.mark.parametrize("name", ["x", "y", "z", "w", "kind"])
    def test_assignment_fails(self, name):
        p = point(1, 2, 3)
        with pytest.raises(AttributeError):
            setattr(p, name, 0.0)
        assert p.is_point
        assert p.is_equal(point(1, 2, 3))

    def test_deletion_fails(self):
        v = vector(1, 2, 3)
        with pytest.raises(AttributeError):
            del v.w
        assert v.is_vector
