import numpy as np
import pytest
from glocko2.core.scaling import scale, unscale


def test_scale():
    mu, phi = scale(1500.0, 200.0)
    assert mu == 0.0
    assert phi == pytest.approx(1.1512924985234674, rel=1e-15)


def test_unscale():
    r, rd = unscale(-0.20694096667525494, 0.8721991881307343)
    assert r == pytest.approx(1464.0506705393013, abs=1e-8)
    assert rd == pytest.approx(151.51652412385727, abs=1e-8)


@pytest.mark.parametrize('r,rd', [(1500.0, 0.0), (2850.5, 45.0), (-300.0, 350.0), (1e6, 1e4)])
def test_round_trip(r, rd):
    assert unscale(*scale(r, rd)) == pytest.approx((r, rd))


def test_scale_arrays():
    rs = np.array([1400.0, 1550.0, 1700.0])
    rds = np.array([30.0, 100.0, 300.0])
    mus, phis = scale(rs, rds)
    np.testing.assert_allclose(mus, [-0.5756462492617337, 0.28782312463086684, 1.1512924985234674])
    np.testing.assert_allclose(phis, [0.1726938747785201, 0.5756462492617337, 1.726938747785201])
    back_rs, back_rds = unscale(mus, phis)
    np.testing.assert_allclose(back_rs, rs)
    np.testing.assert_allclose(back_rds, rds)
