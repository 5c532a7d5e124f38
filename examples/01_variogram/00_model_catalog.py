r"""
Variogram Models
----------------

All theoretical variogram models share the same interface. Here we evaluate
every bounded model with the same sill, nugget and range and compare them
with the unbounded power model.

Example
^^^^^^^

The Gaussian, exponential and Matérn models only approach the sill and use a
practical range, while the compact models reach the sill exactly at the range.
"""

import matplotlib.pyplot as plt
import numpy as np

import geovario as gv

sill, nugget, rng = 2.0, 0.5, 10.0
lags = np.linspace(0.0, 2.5 * rng, 251)

models = [
    gv.Gaussian(sill, nugget, rng),
    gv.Exponential(sill, nugget, rng),
    gv.Spherical(sill, nugget, rng),
    gv.Matern(sill, nugget, rng, nu=1.5),
    gv.Cubic(sill, nugget, rng),
    gv.Pentaspherical(sill, nugget, rng),
    gv.SineHole(sill, nugget, rng),
    gv.Circular(sill, nugget, rng),
]

###############################################################################

fig, ax = plt.subplots(1, 2, figsize=(10, 3.5))

for model in models:
    ax[0].plot(lags, model.evaluate_at(lags), label=model.name)
ax[0].axvline(rng, color="k", ls=":", label="range")
ax[0].axhline(sill, color="k", ls="--", lw=0.8)
ax[0].set_xlabel("lag")
ax[0].legend(fontsize="small")

for exponent in (0.5, 1.0, 1.5, 2.0):
    power = gv.Power(sill=0.1, nugget=nugget, exponent=exponent)
    ax[1].plot(lags, power.evaluate_at(lags), label=f"Power (a={exponent})")
ax[1].set_xlabel("lag")
ax[1].legend(fontsize="small")

plt.tight_layout()
plt.show()
