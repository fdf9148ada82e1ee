"""
Unit tests for the Pearson Type III distribution.

Tests density, distribution, quantile and random generation functions
against scipy and against the distribution's own identities.
"""

import pytest
import numpy as np
from scipy import stats
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


class TestShapeTransform:
    """Test the Gamma-form parameters."""

    def test_positive_skew_transform(self):
        """Test alpha, beta and gamma0 for positive skew."""
        from fao56_et.distributions import Pearson3Params

        t = Pearson3Params(10.0, 0.3, 1.5).shape_transform()

        assert t.alpha == pytest.approx(4.0 / 2.25)
        assert t.beta == pytest.approx(2.25)
        assert t.gamma0 == pytest.approx(6.0)
        assert t.sign == 1.0

    def test_negative_skew_transform(self):
        """Test the support bound lies above the mean for negative skew."""
        from fao56_et.distributions import Pearson3Params

        t = Pearson3Params(10.0, 0.3, -1.5).shape_transform()

        assert t.beta == pytest.approx(2.25)
        assert t.gamma0 == pytest.approx(14.0)
        assert t.sign == -1.0

    def test_zero_skew_has_no_transform(self):
        """Test shape_transform refuses the Normal case."""
        from fao56_et.distributions import Pearson3Params
        from fao56_et.utils.exceptions import ParameterDomainError

        with pytest.raises(ParameterDomainError):
            Pearson3Params(10.0, 0.3, 0.0).shape_transform()

    def test_reflect(self):
        """Test reflection maps the support onto y >= 0."""
        from fao56_et.distributions import ShapeTransform

        t = ShapeTransform(alpha=2.0, beta=1.0, gamma0=14.0, sign=-1.0)

        assert t.reflect(np.array([14.0, 10.0]))[0] == 0.0
        assert t.reflect(np.array([14.0, 10.0]))[1] == pytest.approx(4.0)


class TestParameterValidation:
    """Test parameter domain checks."""

    @pytest.mark.parametrize("cv", [0.0, -0.1, np.nan, np.inf])
    def test_invalid_cv(self, cv):
        """Test non-positive or non-finite cv is rejected."""
        from fao56_et.distributions import dpearson3
        from fao56_et.utils.exceptions import ParameterDomainError

        with pytest.raises(ParameterDomainError) as exc_info:
            dpearson3(1.0, 10.0, cv, 1.0)
        assert exc_info.value.details["parameter"] == "cv"

    @pytest.mark.parametrize("name, args", [
        ("xm", (np.nan, 0.3, 1.0)),
        ("cs", (10.0, 0.3, np.inf)),
    ])
    def test_non_finite_parameters(self, name, args):
        """Test NaN or infinite xm and cs are rejected."""
        from fao56_et.distributions import ppearson3
        from fao56_et.utils.exceptions import ParameterDomainError

        with pytest.raises(ParameterDomainError) as exc_info:
            ppearson3(1.0, *args)
        assert exc_info.value.details["parameter"] == name

    @pytest.mark.parametrize("p", [-0.01, 1.01, [0.5, 2.0]])
    def test_probability_outside_unit_interval(self, p):
        """Test quantile rejects probabilities outside [0, 1]."""
        from fao56_et.distributions import qpearson3
        from fao56_et.utils.exceptions import ParameterDomainError

        with pytest.raises(ParameterDomainError):
            qpearson3(p, 10.0, 0.3, 1.0)

    def test_nan_probability_propagates(self):
        """Test a NaN probability gives a NaN quantile."""
        from fao56_et.distributions import qpearson3

        result = qpearson3([0.5, np.nan], 10.0, 0.3, 1.0)

        assert np.isfinite(result[0])
        assert np.isnan(result[1])

    def test_non_positive_mean_gives_nan(self):
        """Test a non-positive scale gives NaN instead of raising."""
        from fao56_et.distributions import dpearson3, ppearson3

        assert np.isnan(dpearson3(1.0, -10.0, 0.3, 1.0))
        assert np.isnan(ppearson3(1.0, -10.0, 0.3, 0.0))


class TestNormalCase:
    """Test zero skewness collapses to the Normal distribution."""

    def test_density_matches_normal(self):
        """Test density equals the Normal density."""
        from fao56_et.distributions import dpearson3

        assert dpearson3(10.0, 10.0, 0.3, 0.0) == stats.norm.pdf(10.0, loc=10.0, scale=3.0)

    def test_cdf_and_quantile_match_normal(self, probabilities):
        """Test cdf and quantile equal the Normal ones, in both tails."""
        from fao56_et.distributions import ppearson3, qpearson3

        x = qpearson3(probabilities, 10.0, 0.3, 0.0)

        np.testing.assert_allclose(x, stats.norm.ppf(probabilities, loc=10.0, scale=3.0))
        np.testing.assert_allclose(ppearson3(x, 10.0, 0.3, 0.0), probabilities)
        np.testing.assert_allclose(
            ppearson3(x, 10.0, 0.3, 0.0, lower_tail=False),
            stats.norm.sf(x, loc=10.0, scale=3.0)
        )

    def test_quantile_bounds_are_infinite(self):
        """Test p = 0 and p = 1 give the infinite ends of the support."""
        from fao56_et.distributions import qpearson3

        result = qpearson3([0.0, 1.0], 10.0, 0.3, 0.0)

        assert result[0] == -np.inf
        assert result[1] == np.inf


class TestAgreementWithScipy:
    """Test against scipy.stats.pearson3, parameterised by mean, sd and skew."""

    def test_density(self, skewed_params, probabilities):
        """Test density agrees inside the support."""
        from fao56_et.distributions import dpearson3, qpearson3

        xm, cv, cs = skewed_params
        x = qpearson3(probabilities, xm, cv, cs)
        expected = stats.pearson3.pdf(x, cs, loc=xm, scale=xm * cv)

        np.testing.assert_allclose(dpearson3(x, xm, cv, cs), expected, rtol=1e-6)

    def test_cdf(self, skewed_params):
        """Test cumulative probability agrees on a grid around the mean."""
        from fao56_et.distributions import ppearson3

        xm, cv, cs = skewed_params
        x = np.linspace(xm * (1 - 2 * cv), xm * (1 + 2 * cv), 21)
        expected = stats.pearson3.cdf(x, cs, loc=xm, scale=xm * cv)

        np.testing.assert_allclose(ppearson3(x, xm, cv, cs), expected, rtol=1e-6, atol=1e-12)

    def test_quantile(self, skewed_params, probabilities):
        """Test quantiles agree."""
        from fao56_et.distributions import qpearson3

        xm, cv, cs = skewed_params
        expected = stats.pearson3.ppf(probabilities, cs, loc=xm, scale=xm * cv)

        np.testing.assert_allclose(qpearson3(probabilities, xm, cv, cs), expected, rtol=1e-6)


class TestIdentities:
    """Test relations between density, cdf and quantile."""

    def test_quantile_cdf_round_trip(self, skewed_params, probabilities):
        """Test cdf(quantile(p)) recovers p."""
        from fao56_et.distributions import ppearson3, qpearson3

        xm, cv, cs = skewed_params
        x = qpearson3(probabilities, xm, cv, cs)

        np.testing.assert_allclose(ppearson3(x, xm, cv, cs), probabilities, rtol=1e-8, atol=1e-12)

    def test_tails_sum_to_one(self, skewed_params):
        """Test lower and upper tail probabilities are complementary."""
        from fao56_et.distributions import ppearson3

        xm, cv, cs = skewed_params
        x = np.linspace(xm * (1 - cv), xm * (1 + cv), 11)
        total = ppearson3(x, xm, cv, cs) + ppearson3(x, xm, cv, cs, lower_tail=False)

        np.testing.assert_allclose(total, 1.0, atol=1e-12)

    def test_upper_tail_quantile(self, skewed_params, probabilities):
        """Test an exceedance probability p matches a non-exceedance 1 - p."""
        from fao56_et.distributions import qpearson3

        xm, cv, cs = skewed_params
        upper = qpearson3(probabilities, xm, cv, cs, lower_tail=False)
        lower = qpearson3(1.0 - probabilities, xm, cv, cs)

        np.testing.assert_allclose(upper, lower, rtol=1e-6)

    def test_cdf_is_monotonic(self, skewed_params):
        """Test the cdf never decreases."""
        from fao56_et.distributions import ppearson3

        xm, cv, cs = skewed_params
        x = np.linspace(xm * (1 - 4 * cv), xm * (1 + 4 * cv), 200)

        assert np.all(np.diff(ppearson3(x, xm, cv, cs)) >= 0)

    def test_negative_skew_mirrors_positive(self):
        """Test skew -cs is the reflection of skew cs about the mean."""
        from fao56_et.distributions import dpearson3, ppearson3

        xm, cv, cs = 10.0, 0.3, 1.5
        x = np.array([8.0, 9.5, 10.0, 11.0, 13.0])
        mirrored = 2 * xm - x

        np.testing.assert_allclose(dpearson3(x, xm, cv, -cs), dpearson3(mirrored, xm, cv, cs))
        np.testing.assert_allclose(
            ppearson3(x, xm, cv, -cs),
            ppearson3(mirrored, xm, cv, cs, lower_tail=False)
        )

    def test_far_upper_tail_keeps_precision(self):
        """Test the upper tail does not round to zero where 1 - cdf would."""
        from fao56_et.distributions import ppearson3

        p = ppearson3(130.0, 10.0, 0.3, 1.5, lower_tail=False)

        assert 0.0 < p < 1e-15


class TestSupport:
    """Test behaviour at and beyond the finite support bound."""

    def test_density_outside_support(self):
        """Test zero density beyond the support bound."""
        from fao56_et.distributions import dpearson3

        # gamma0 = 6 for positive skew, 14 for negative skew
        assert dpearson3(5.0, 10.0, 0.3, 1.5) == 0.0
        assert dpearson3(15.0, 10.0, 0.3, -1.5) == 0.0

    def test_density_at_bound(self):
        """Test zero density at the bound itself."""
        from fao56_et.distributions import dpearson3

        assert dpearson3(6.0, 10.0, 0.3, 1.5) == 0.0

    def test_cdf_outside_support(self):
        """Test cdf is 0 below and 1 above the support."""
        from fao56_et.distributions import ppearson3

        assert ppearson3(5.0, 10.0, 0.3, 1.5) == 0.0
        assert ppearson3(15.0, 10.0, 0.3, -1.5) == 1.0

    def test_quantile_bounds_positive_skew(self):
        """Test p = 0 gives the lower bound and p = 1 infinity."""
        from fao56_et.distributions import qpearson3

        result = qpearson3([0.0, 1.0], 10.0, 0.3, 1.5)

        assert result[0] == pytest.approx(6.0)
        assert result[1] == np.inf

    def test_quantile_bounds_negative_skew(self):
        """Test p = 0 gives minus infinity and p = 1 the upper bound."""
        from fao56_et.distributions import qpearson3

        result = qpearson3([0.0, 1.0], 10.0, 0.3, -1.5)

        assert result[0] == -np.inf
        assert result[1] == pytest.approx(14.0)


class TestShapes:
    """Test scalar and array handling."""

    def test_scalar_returns_float(self):
        """Test scalar input gives a Python float."""
        from fao56_et.distributions import dpearson3, ppearson3, qpearson3

        assert isinstance(dpearson3(10.0, 10.0, 0.3, 1.0), float)
        assert isinstance(ppearson3(10.0, 10.0, 0.3, 1.0), float)
        assert isinstance(qpearson3(0.5, 10.0, 0.3, 1.0), float)

    def test_array_shape_preserved(self):
        """Test array input keeps its shape."""
        from fao56_et.distributions import dpearson3, qpearson3

        x = np.full((3, 4), 10.0)

        assert dpearson3(x, 10.0, 0.3, 1.0).shape == (3, 4)
        assert qpearson3([[0.1, 0.5], [0.9, 0.99]], 10.0, 0.3, 1.0).shape == (2, 2)

    def test_empty_input(self):
        """Test empty input gives an empty result."""
        from fao56_et.distributions import ppearson3

        assert ppearson3([], 10.0, 0.3, 1.0).shape == (0,)


class TestRandomGeneration:
    """Test random sampling."""

    def test_sample_moments(self, rng):
        """Test sample mean, sd and skewness approach the parameters."""
        from fao56_et.distributions import rpearson3

        x = rpearson3(20000, 10.0, 0.3, 1.5, random_state=rng)

        assert x.shape == (20000,)
        assert np.mean(x) == pytest.approx(10.0, abs=0.1)
        assert np.std(x) == pytest.approx(3.0, abs=0.1)
        assert stats.skew(x) == pytest.approx(1.5, abs=0.3)

    @pytest.mark.parametrize("cs", [1.5, -1.5])
    def test_large_sample_mean_and_skew_sign(self, rng, cs):
        """Test 100000 draws: mean within 5% of xm, skewness sign of cs."""
        from fao56_et.distributions import rpearson3

        x = rpearson3(100000, 10.0, 0.3, cs, random_state=rng)

        assert abs(np.mean(x) - 10.0) <= 0.05 * 10.0
        assert np.sign(stats.skew(x)) == np.sign(cs)

    def test_sampling_is_silent(self, rng, log_records):
        """Test a plain library call to the sampler logs nothing."""
        from fao56_et.distributions import rpearson3

        rpearson3(100, 10.0, 0.3, 1.5, random_state=rng)

        assert log_records == []

    def test_samples_respect_support(self, rng):
        """Test samples stay on the bounded side of gamma0."""
        from fao56_et.distributions import rpearson3

        assert np.all(rpearson3(1000, 10.0, 0.3, 1.5, random_state=rng) >= 6.0)
        assert np.all(rpearson3(1000, 10.0, 0.3, -1.5, random_state=rng) <= 14.0)

    def test_normal_case_samples(self, rng):
        """Test zero skewness draws from the Normal distribution."""
        from fao56_et.distributions import rpearson3

        x = rpearson3(20000, 10.0, 0.3, 0.0, random_state=rng)

        assert np.mean(x) == pytest.approx(10.0, abs=0.1)
        assert stats.skew(x) == pytest.approx(0.0, abs=0.1)

    def test_seed_reproducible(self):
        """Test the same integer seed gives the same draws."""
        from fao56_et.distributions import rpearson3

        a = rpearson3(10, 10.0, 0.3, 1.0, random_state=42)
        b = rpearson3(10, 10.0, 0.3, 1.0, random_state=42)

        np.testing.assert_array_equal(a, b)

    def test_sequence_gives_size(self, rng):
        """Test a sequence argument draws one value per element."""
        from fao56_et.distributions import rpearson3

        assert rpearson3([7, 8, 9], 10.0, 0.3, 1.0, random_state=rng).shape == (3,)

    def test_zero_samples(self):
        """Test n = 0 gives an empty array."""
        from fao56_et.distributions import rpearson3

        assert rpearson3(0, 10.0, 0.3, 1.0).shape == (0,)

    @pytest.mark.parametrize("n", [-1, 2.5, np.nan, np.inf])
    def test_invalid_size(self, n):
        """Test negative, fractional or non-finite n is rejected."""
        from fao56_et.distributions import rpearson3
        from fao56_et.utils.exceptions import ParameterDomainError

        with pytest.raises(ParameterDomainError):
            rpearson3(n, 10.0, 0.3, 1.0)

    def test_non_positive_scale_gives_nan(self):
        """Test xm = 0 gives NaN samples."""
        from fao56_et.distributions import rpearson3

        x = rpearson3(3, 0.0, 0.3, 1.0)

        assert x.shape == (3,)
        assert np.all(np.isnan(x))


class TestPearson3Distribution:
    """Test the bound distribution object."""

    def test_moments(self):
        """Test mean, std and skewness properties."""
        from fao56_et.distributions import Pearson3Distribution

        dist = Pearson3Distribution.from_moments(xm=850.0, cv=0.45, cs=1.2)

        assert dist.mean == 850.0
        assert dist.std == pytest.approx(382.5)
        assert dist.skewness == 1.2

    def test_methods_delegate(self):
        """Test methods equal the module-level functions."""
        from fao56_et.distributions import Pearson3Distribution, dpearson3, ppearson3, qpearson3

        dist = Pearson3Distribution.from_moments(xm=850.0, cv=0.45, cs=1.2)

        assert dist.density(900.0) == dpearson3(900.0, 850.0, 0.45, 1.2)
        assert dist.cdf(900.0, lower_tail=False) == ppearson3(900.0, 850.0, 0.45, 1.2, lower_tail=False)
        assert dist.quantile(0.01, lower_tail=False) == qpearson3(0.01, 850.0, 0.45, 1.2, lower_tail=False)

    def test_hundred_year_flood(self):
        """Test the 1% exceedance flood lies well above the mean."""
        from fao56_et.distributions import Pearson3Distribution

        dist = Pearson3Distribution.from_moments(xm=850.0, cv=0.45, cs=1.2)
        q100 = dist.quantile(0.01, lower_tail=False)

        assert q100 > dist.mean + 2 * dist.std
        assert dist.cdf(q100, lower_tail=False) == pytest.approx(0.01)

    def test_sample(self, rng):
        """Test sample size."""
        from fao56_et.distributions import Pearson3Distribution

        dist = Pearson3Distribution.from_moments(xm=10.0, cv=0.3, cs=1.0)

        assert dist.sample(25, random_state=rng).shape == (25,)

    def test_invalid_parameters(self):
        """Test construction validates the parameters."""
        from fao56_et.distributions import Pearson3Distribution
        from fao56_et.utils.exceptions import ParameterDomainError

        with pytest.raises(ParameterDomainError):
            Pearson3Distribution.from_moments(xm=10.0, cv=-0.3, cs=1.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
