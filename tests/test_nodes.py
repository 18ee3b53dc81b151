import math

import numpy as np
import pytest

from func_algebra import (
    Constant, Identity, Sum, Product, Power, ExpWithBase, ExpNatural,
    LogWithBase, LogNatural, Sine, Cosine, Tangent, ArcSine, ArcCosine,
    ArcTangent, SquareRoot, CubeRoot, NthRoot, NodeType
)

SAMPLE_INPUTS = [-3.5, -1.0, 0.0, 0.25, 1.0, 2.0, 7.75, 1e6]


def test_sum_of_identity_and_constant():
    assert Sum(Identity(), Constant(5.0)).evaluate(3.0) == 8.0


def test_product_of_identities():
    assert Product(Identity(), Identity()).evaluate(4.0) == 16.0


def test_square_root_through_nth_root():
    assert NthRoot(2.0, Identity()).evaluate(9.0) == 3.0


def test_sine_at_zero():
    assert Sine(Identity()).evaluate(0.0) == 0.0


def test_integer_power():
    assert Power(Identity(), 3.0).evaluate(2.0) == 8.0


def test_log_base_two():
    assert LogWithBase(2.0, Identity()).evaluate(8.0) == 3.0


@pytest.mark.parametrize("x", SAMPLE_INPUTS)
def test_identity_returns_input(x):
    assert Identity().evaluate(x) == x


@pytest.mark.parametrize("x", SAMPLE_INPUTS)
def test_constant_ignores_input(x):
    assert Constant(-2.5).evaluate(x) == -2.5


@pytest.mark.parametrize("x", SAMPLE_INPUTS)
def test_binary_nodes_match_float_arithmetic(x):
    f = Sine(Identity())
    g = Sum(Identity(), Constant(0.1))
    assert Sum(f, g).evaluate(x) == f.evaluate(x) + g.evaluate(x)
    assert Product(f, g).evaluate(x) == f.evaluate(x) * g.evaluate(x)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_integer_power_matches_repeated_multiplication(n):
    f = Sum(Identity(), Constant(0.5))
    x = 1.3
    expected = 1.0
    for _ in range(n):
        expected *= f.evaluate(x)
    assert Power(f, float(n)).evaluate(x) == pytest.approx(expected)


@pytest.mark.parametrize("n", [2.0, 3.0, 0.5, -2.0, 7.0])
def test_nth_root_is_power_of_reciprocal(n):
    f = Sum(Identity(), Constant(1.0))
    for x in [0.5, 2.0, 10.0]:
        assert NthRoot(n, f).evaluate(x) == Power(f, 1.0 / n).evaluate(x)


@pytest.mark.parametrize("x", [-20.0, -1.0, 0.0, 0.5, 3.0, 20.0])
def test_log_of_exp_round_trip(x):
    f = Product(Identity(), Constant(1.5))
    assert LogNatural(ExpNatural(f)).evaluate(x) == pytest.approx(f.evaluate(x))


def test_natural_exponential_transforms_child_result():
    assert ExpNatural(Constant(0.0)).evaluate(5.0) == 1.0
    assert ExpNatural(Constant(1.0)).evaluate(-3.0) == pytest.approx(math.e)


def test_exponential_with_base():
    assert ExpWithBase(2.0, Identity()).evaluate(10.0) == 1024.0
    assert ExpWithBase(10.0, Constant(-1.0)).evaluate(0.0) == pytest.approx(0.1)


def test_trigonometric_family():
    x = 0.3
    assert Sine(Identity()).evaluate(x) == pytest.approx(math.sin(x))
    assert Cosine(Identity()).evaluate(x) == pytest.approx(math.cos(x))
    assert Tangent(Identity()).evaluate(x) == pytest.approx(math.tan(x))
    assert ArcSine(Identity()).evaluate(x) == pytest.approx(math.asin(x))
    assert ArcCosine(Identity()).evaluate(x) == pytest.approx(math.acos(x))
    assert ArcTangent(Identity()).evaluate(x) == pytest.approx(math.atan(x))


def test_inverse_trig_undoes_trig_in_principal_range():
    assert ArcTangent(Tangent(Identity())).evaluate(1.2) == pytest.approx(1.2)
    assert ArcCosine(Cosine(Identity())).evaluate(2.5) == pytest.approx(2.5)


def test_roots():
    assert SquareRoot(Identity()).evaluate(16.0) == 4.0
    assert CubeRoot(Identity()).evaluate(27.0) == pytest.approx(3.0)
    assert CubeRoot(Identity()).evaluate(-27.0) == pytest.approx(-3.0)


def test_nested_composition():
    # sqrt(sin(x)^2 + cos(x)^2) == 1
    tree = SquareRoot(Sum(Power(Sine(Identity()), 2.0), Power(Cosine(Identity()), 2.0)))
    for x in SAMPLE_INPUTS[:-1]:
        assert tree.evaluate(x) == pytest.approx(1.0)


def test_call_is_evaluate():
    tree = Sum(Identity(), Constant(1.0))
    assert tree(2.0) == tree.evaluate(2.0) == 3.0


def test_nth_root_rejects_zero_degree():
    with pytest.raises(ValueError, match="nonzero"):
        NthRoot(0.0, Identity())
    with pytest.raises(ValueError):
        NthRoot(-0.0, Identity())


def test_children_must_be_nodes():
    with pytest.raises(TypeError):
        Sum(Identity(), 5.0)
    with pytest.raises(TypeError):
        Sine("x")
    with pytest.raises(TypeError):
        Power(Identity(), Identity())


def test_parameters_are_stored_as_floats():
    assert isinstance(Constant(3).value, float)
    assert Power(Identity(), 2).exponent == 2.0
    assert ExpWithBase(3, Identity()).base == 3.0
    assert LogWithBase(10, Identity()).base == 10.0
    assert NthRoot(4, Identity()).degree == 4.0


def test_nodes_are_immutable():
    const = Constant(1.0)
    tree = Sum(Identity(), const)
    root = NthRoot(3.0, Identity())
    with pytest.raises(AttributeError):
        const.value = 2.0
    with pytest.raises(AttributeError):
        tree.left = Constant(0.0)
    with pytest.raises(AttributeError):
        root.param = 0.0
    with pytest.raises(AttributeError):
        del tree.right
    with pytest.raises(AttributeError):
        Identity().label = "x"
    assert root.degree == 3.0


def test_evaluation_does_not_change_tree():
    tree = Product(Sum(Identity(), Constant(2.0)), LogNatural(Identity()))
    before = repr(tree)
    for x in SAMPLE_INPUTS:
        tree.evaluate(x)
    assert repr(tree) == before


def test_size_depth_and_children():
    inner = Sine(Constant(1.0))
    tree = Sum(Identity(), inner)
    assert tree.size() == 4
    assert tree.depth() == 3
    assert tree.children == (tree.left, inner)
    assert Identity().children == ()
    assert Identity().size() == 1 and Identity().depth() == 1


def test_node_types():
    assert Constant(1.0).node_type == NodeType.CONSTANT
    assert Identity().node_type == NodeType.IDENTITY
    assert Product(Identity(), Identity()).node_type == NodeType.BINARY_OP
    assert CubeRoot(Identity()).node_type == NodeType.UNARY_OP


def test_structural_equality_and_hash():
    a = Sum(Identity(), Constant(5))
    b = Sum(Identity(), Constant(5.0))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Sum(Constant(5.0), Identity())
    assert Power(Identity(), 2.0) != Power(Identity(), 3.0)
    assert Sine(Identity()) != Cosine(Identity())
    assert len({a, b, Sine(Identity())}) == 2


def test_copy_builds_fresh_equal_tree():
    tree = LogWithBase(2.0, Sum(Identity(), NthRoot(3.0, Constant(8.0))))
    clone = tree.copy()
    assert clone == tree
    assert clone is not tree
    assert clone.operand is not tree.operand
    assert clone.evaluate(1.5) == tree.evaluate(1.5)


def test_to_string():
    assert Sum(Identity(), Constant(5.0)).to_string() == "(x + 5)"
    assert Sine(Product(Constant(2.0), Identity())).to_string() == "sin((2 * x))"
    assert Power(Identity(), 0.5).to_string() == "(x ^ 0.5)"
    assert ExpWithBase(2.0, Identity()).to_string() == "(2 ^ x)"
    assert LogWithBase(2.0, Identity()).to_string() == "log(x, 2)"
    assert NthRoot(3.0, Identity()).to_string() == "root(x, 3)"
    assert str(CubeRoot(Identity())) == "cbrt(x)"


def test_repr_uses_constructor_form():
    assert repr(Sum(Identity(), Constant(5.0))) == "Sum(Identity(), Constant(5.0))"
    assert repr(NthRoot(2.0, Identity())) == "NthRoot(2.0, Identity())"
    assert repr(Power(ExpNatural(Identity()), 2.0)) == "Power(ExpNatural(Identity()), 2.0)"
    assert repr(LogWithBase(10.0, Identity())) == "LogWithBase(10.0, Identity())"


def test_integer_inputs_are_evaluated_as_floats():
    square = Product(Identity(), Identity())
    assert square.evaluate(2**40) == pytest.approx(2.0**80)
    assert square.evaluate(10**20) == pytest.approx(1e40)
    assert Sum(Identity(), Constant(1.0)).evaluate(10**20) == pytest.approx(1e20)
    assert SquareRoot(Identity()).evaluate(16) == 4.0
    result = Identity().evaluate(3)
    assert isinstance(result, float) and result == 3.0


def test_integer_arrays_are_evaluated_as_floats():
    result = Product(Identity(), Identity()).evaluate(np.array([2**40, 3]))
    assert result.dtype == np.float64
    assert result[0] == pytest.approx(2.0**80)
    assert result[1] == 9.0


def test_signed_zero_parameters_are_distinct():
    assert Power(Constant(0.0), -1.0).evaluate(0.0) == math.inf
    assert Power(Constant(-0.0), -1.0).evaluate(0.0) == -math.inf
    assert Constant(0.0) != Constant(-0.0)
    assert Power(Identity(), 0.0) != Power(Identity(), -0.0)
    assert Constant(0.0) == Constant(0)
