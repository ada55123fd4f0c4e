import numpy as np
import pytest

from scalargrad import Node, Op
from scalargrad.ops import add, sub, mul, div, neg, pow, exp, tanh


def test_forward_values():
    a = Node(2.0, "a")
    b = Node(-3.0, "b")

    assert add(a, b).value == -1.0
    assert mul(a, b).value == -6.0
    assert pow(a, b).value == pytest.approx(0.125)
    assert tanh(a).value == pytest.approx(np.tanh(2.0))
    assert exp(b).value == pytest.approx(np.exp(-3.0))
    assert sub(a, b).value == 5.0
    assert div(a, b).value == pytest.approx(-2.0 / 3.0)
    assert neg(a).value == -2.0


def test_operator_tags_and_arity():
    a = Node(1.5)
    b = Node(0.5)
    for node, op in [(a + b, Op.ADD), (a * b, Op.MUL), (a ** b, Op.POW),
                     (a.tanh(), Op.TANH), (a.exp(), Op.EXP)]:
        assert node.op is op
        assert len(node.operands) == op.arity
    assert a.op is Op.NONE and a.operands == ()


def test_operand_order_is_insertion_order():
    # Equal values must not be reordered
    base = Node(2.0, "base")
    expo = Node(2.0, "expo")
    p = base ** expo
    assert p.operands[0] is base
    assert p.operands[1] is expo

    big = Node(9.0)
    small = Node(1.0)
    m = big * small
    assert m.operands == (big, small)


def test_same_node_twice():
    a = Node(3.0)
    sq = a * a
    assert sq.operands[0] is a and sq.operands[1] is a
    assert sq.value == 9.0


def test_sub_and_div_build_intermediate_nodes():
    a = Node(4.0, "a")
    b = Node(2.0, "b")

    d = a - b
    assert d.op is Op.ADD
    assert d.operands[0] is a
    negated = d.operands[1]
    assert negated.op is Op.MUL
    assert negated.operands[0] is b
    assert negated.operands[1].value == -1.0

    q = a / b
    assert q.op is Op.MUL
    assert q.operands[0] is a
    inverted = q.operands[1]
    assert inverted.op is Op.POW
    assert inverted.operands[0] is b
    assert inverted.operands[1].value == -1.0


def test_literal_operands_are_promoted_to_scalar_leaves():
    a = Node(2.0, "a")
    out = a + 3
    lit = out.operands[1]
    assert lit.is_leaf
    assert lit.label == "scalar"
    assert lit.value == 3.0


def test_reflected_operators():
    a = Node(4.0)
    assert (1 + a).value == 5.0
    assert (1 - a).value == -3.0
    assert (3 * a).value == 12.0
    assert (2 / a).value == 0.5
    assert (2 ** Node(3.0)).value == 8.0
    # literal on the left is still the left operand
    assert (3 * a).operands[0].value == 3.0


def test_builders_do_not_touch_gradients():
    a = Node(1.0)
    b = Node(2.0)
    c = (a * b + a).tanh()
    assert a.gradient == 0 and b.gradient == 0 and c.gradient == 0


def test_forward_state_is_read_only():
    a = Node(1.0)
    with pytest.raises(AttributeError):
        a.value = 2.0
    with pytest.raises(AttributeError):
        a.operands = ()
    a.label = "renamed"
    assert a.label == "renamed"


def test_domain_errors_produce_nan_and_inf():
    # negative base with fractional exponent
    r = Node(-8.0) ** 0.5
    assert np.isnan(r.value)

    q = Node(1.0) / Node(0.0)
    assert np.isinf(q.value)

    # poison flows forward
    s = r + 1.0
    assert np.isnan(s.value)


def test_invalid_inputs_raise():
    with pytest.raises(TypeError):
        Node("1.0")
    with pytest.raises(TypeError):
        Node(2.0) + "x"
    with pytest.raises(TypeError):
        Node([1.0, 2.0])


def test_arity_mismatch_rejected_at_construction():
    a = Node(1.0)
    with pytest.raises(ValueError):
        Node._from_op(1.0, Op.ADD, (a,))
    with pytest.raises(ValueError):
        Node._from_op(1.0, Op.TANH, (a, a))
