from fhetoolkit.simple_sum import simple_sum


def test_basic():
    assert simple_sum(64, 45) == 109


def test_negative_value():
    assert simple_sum(64, -45) == 19


def test_two_negative_values():
    assert simple_sum(-64, -45) == -109


def test_sample_inputs():
    assert simple_sum(4052, 913) == 4965


def test_wraps_at_32_bits():
    assert simple_sum(2**31 - 1, 1) == -(2**31)


def test_commutative():
    assert simple_sum(123, -456) == simple_sum(-456, 123)