"""
geovario subpackage providing the theoretical variogram models.

.. currentmodule:: geovario.variogram.models

Models with a practical range (Gaussian, Exponential, Matern) reach
95 % of the partial sill at the range, i.e. the lag is scaled by a factor
of 3 inside the exponential. Models with compact support reach the sill
exactly at the range.

The following classes are provided

.. autosummary::
   Gaussian
   Exponential
   Spherical
   Matern
   Cubic
   Pentaspherical
   SineHole
   Power
   Nugget
   Circular
"""

import numpy as np
from scipy import special

from geovario.errors import InvalidParameter
from geovario.variogram.base import Variogram

__all__ = [
    "Gaussian",
    "Exponential",
    "Spherical",
    "Matern",
    "Cubic",
    "Pentaspherical",
    "SineHole",
    "Power",
    "Nugget",
    "Circular",
]


class Gaussian(Variogram):
    """
    The Gaussian variogram model.

    .. math::
       \\gamma(h) = n + (s - n)
       \\left(1 - \\exp\\left(-3 \\left(\\frac{h}{r}\\right)^2\\right)\\right)

    Parameters
    ----------
    sill : :class:`float`, optional
        Sill of the model. Default: 1.0
    nugget : :class:`float`, optional
        Nugget of the model. Default: 0.0
    ball : :any:`MetricBall` or :class:`float` or :class:`list`, optional
        Metric ball or (practical) range(s). Default: 1.0

    Examples
    --------
    >>> model = Gaussian(sill=2.0, nugget=0.5, ball=10.0)
    >>> print(model.evaluate_at(0.0))
    0.5
    """

    def normalized(self, u):
        """Gaussian shape :math:`1 - \\exp(-3 u^2)`."""
        return 1.0 - np.exp(-3.0 * u**2)


class Exponential(Variogram):
    """
    The exponential variogram model.

    .. math::
       \\gamma(h) = n + (s - n)
       \\left(1 - \\exp\\left(-3 \\frac{h}{r}\\right)\\right)

    Parameters
    ----------
    sill : :class:`float`, optional
        Sill of the model. Default: 1.0
    nugget : :class:`float`, optional
        Nugget of the model. Default: 0.0
    ball : :any:`MetricBall` or :class:`float` or :class:`list`, optional
        Metric ball or (practical) range(s). Default: 1.0
    """

    def normalized(self, u):
        """Exponential shape :math:`1 - \\exp(-3 u)`."""
        return 1.0 - np.exp(-3.0 * u)


class Spherical(Variogram):
    """
    The spherical variogram model.

    .. math::
       \\gamma(h) = n + (s - n)
       \\begin{cases}
       \\frac{3}{2} \\frac{h}{r} - \\frac{1}{2} \\left(\\frac{h}{r}\\right)^3
       & h < r \\\\
       1 & h \\geq r
       \\end{cases}
    """

    def normalized(self, u):
        """Spherical shape."""
        u = np.minimum(u, 1.0)
        return 1.5 * u - 0.5 * u**3


class Matern(Variogram):
    """
    The Matérn variogram model.

    .. math::
       \\gamma(h) = n + (s - n) \\left(1 - \\frac{2^{1-\\nu}}{\\Gamma(\\nu)}
       \\delta^\\nu K_\\nu(\\delta)\\right),
       \\quad \\delta = \\sqrt{2\\nu} \\cdot 3 \\frac{h}{r}

    where :math:`K_\\nu` is the modified Bessel function of the second kind.
    :math:`\\nu = 0.5` gives the exponential model, :math:`\\nu \\to \\infty`
    approaches the Gaussian model.

    Parameters
    ----------
    sill : :class:`float`, optional
        Sill of the model. Default: 1.0
    nugget : :class:`float`, optional
        Nugget of the model. Default: 0.0
    ball : :any:`MetricBall` or :class:`float` or :class:`list`, optional
        Metric ball or (practical) range(s). Default: 1.0
    nu : :class:`float`, optional
        Smoothness parameter, must be positive. Default: 1.0
    """

    def __init__(self, sill=1.0, nugget=0.0, ball=1.0, nu=1.0):
        self._nu = float(nu)
        super().__init__(sill=sill, nugget=nugget, ball=ball)

    def _validate(self):
        super()._validate()
        if not self._nu > 0:
            raise InvalidParameter(
                f"{self.name}: nu must be positive, got {self._nu}"
            )

    @property
    def nu(self):
        """:class:`float`: The smoothness parameter."""
        return self._nu

    def normalized(self, u):
        """Matérn shape, evaluated with the scaled Bessel function."""
        nu = self._nu
        delta = np.sqrt(2.0 * nu) * 3.0 * u
        cor = np.ones_like(delta)
        cor[np.isinf(delta)] = 0.0
        pos = (delta > 0) & np.isfinite(delta)
        dpos = delta[pos]
        # K_nu(d) = kve(nu, d) * exp(-d), combined in log space
        log_fac = (1.0 - nu) * np.log(2.0) - special.gammaln(nu)
        cor[pos] = np.exp(log_fac + nu * np.log(dpos) - dpos) * special.kve(nu, dpos)
        return 1.0 - cor

    def _params(self):
        return {"nu": self._nu}


class Cubic(Variogram):
    """
    The cubic variogram model.

    .. math::
       \\gamma(h) = n + (s - n)
       \\begin{cases}
       7 u^2 - \\frac{35}{4} u^3 + \\frac{7}{2} u^5 - \\frac{3}{4} u^7
       & u < 1 \\\\
       1 & u \\geq 1
       \\end{cases},
       \\quad u = \\frac{h}{r}
    """

    def normalized(self, u):
        """Cubic shape."""
        u = np.minimum(u, 1.0)
        return 7.0 * u**2 - 35.0 / 4.0 * u**3 + 7.0 / 2.0 * u**5 - 3.0 / 4.0 * u**7


class Pentaspherical(Variogram):
    """
    The pentaspherical variogram model.

    .. math::
       \\gamma(h) = n + (s - n)
       \\begin{cases}
       \\frac{15}{8} u - \\frac{5}{4} u^3 + \\frac{3}{8} u^5 & u < 1 \\\\
       1 & u \\geq 1
       \\end{cases},
       \\quad u = \\frac{h}{r}
    """

    def normalized(self, u):
        """Pentaspherical shape."""
        u = np.minimum(u, 1.0)
        return 15.0 / 8.0 * u - 5.0 / 4.0 * u**3 + 3.0 / 8.0 * u**5


class SineHole(Variogram):
    """
    The sine hole (hole effect) variogram model.

    .. math::
       \\gamma(h) = n + (s - n)
       \\left(1 - \\frac{\\sin(\\pi h / r)}{\\pi h / r}\\right)

    The model oscillates around the sill and is therefore not monotonic.
    """

    def normalized(self, u):
        """Sine hole shape :math:`1 - \\mathrm{sinc}(u)`."""
        g = np.ones_like(u)
        fin = np.isfinite(u)
        g[fin] = 1.0 - np.sinc(u[fin])
        return g


class Circular(Variogram):
    """
    The circular variogram model.

    .. math::
       \\gamma(h) = n + (s - n)
       \\begin{cases}
       1 - \\frac{2}{\\pi} \\left(\\arccos(u) - u \\sqrt{1 - u^2}\\right)
       & u < 1 \\\\
       1 & u \\geq 1
       \\end{cases},
       \\quad u = \\frac{h}{r}
    """

    def normalized(self, u):
        """Circular shape."""
        u = np.minimum(u, 1.0)
        return 1.0 - (2.0 * np.arccos(u) - 2.0 * u * np.sqrt(1.0 - u**2)) / np.pi


class Power(Variogram):
    """
    The power variogram model.

    .. math::
       \\gamma(h) = n + s \\cdot h^a

    The model is unbounded and thus not 2nd-order stationary.
    It has no metric ball; lags are Euclidean distances.

    Parameters
    ----------
    sill : :class:`float`, optional
        Scaling of the power law (increase of the variogram at unit lag).
        Default: 1.0
    nugget : :class:`float`, optional
        Nugget of the model. Default: 0.0
    exponent : :class:`float`, optional
        Exponent :math:`a` in (0, 2]. Default: 1.0
    """

    stationary = False
    has_ball = False

    def __init__(self, sill=1.0, nugget=0.0, exponent=1.0):
        self._exponent = float(exponent)
        super().__init__(sill=sill, nugget=nugget)

    def _validate(self):
        super()._validate()
        if not 0.0 < self._exponent <= 2.0:
            raise InvalidParameter(
                f"{self.name}: exponent must be in (0, 2], got {self._exponent}"
            )

    @property
    def exponent(self):
        """:class:`float`: The exponent of the power law."""
        return self._exponent

    @property
    def range(self):
        """:class:`float`: The power model has infinite range."""
        return np.inf

    def normalized(self, u):
        """Power law :math:`u^a` of the (unscaled) lag."""
        return u**self._exponent

    def evaluate_at(self, h):
        h = self._check_lag(h)
        gamma = self._nugget + self._sill * self.normalized(np.atleast_1d(h))
        return gamma.reshape(h.shape)[()]

    def _params(self):
        return {"exponent": self._exponent}


class Nugget(Variogram):
    """
    The pure nugget effect variogram model.

    .. math::
       \\gamma(h) =
       \\begin{cases}
       n & h = 0 \\\\
       s & h > 0
       \\end{cases}

    The model has no spatial structure, no metric ball and is isotropic.

    Parameters
    ----------
    sill : :class:`float`, optional
        Value for every positive lag. Default: 1.0
    nugget : :class:`float`, optional
        Value at zero lag. Default: 0.0
    """

    has_ball = False

    def __init__(self, sill=1.0, nugget=0.0):
        super().__init__(sill=sill, nugget=nugget)

    @property
    def range(self):
        """:class:`float`: The nugget model has zero range."""
        return 0.0

    def normalized(self, u):
        """Unit step at zero."""
        return np.where(u > 0, 1.0, 0.0)

    def evaluate_at(self, h):
        h = self._check_lag(h)
        step = self.normalized(np.atleast_1d(h))
        gamma = np.where(step > 0, self._sill, self._nugget)
        return gamma.reshape(h.shape)[()]
