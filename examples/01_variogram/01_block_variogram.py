r"""
Regularized Variogram Matrix
----------------------------

Variograms can be evaluated between regions (supports) instead of points.
Each region is replaced by its discretization and the variogram is averaged
over all pairs of sample points.

Example
^^^^^^^

Here we build the variogram matrix of a set of blocks with an anisotropic
spherical model and compare it with the matrix of the block centres.
The diagonal of the block matrix holds the within-block variance, while the
point matrix has the nugget on its diagonal.
"""

import matplotlib.pyplot as plt
import numpy as np

import geovario as gv

ball = gv.MetricBall([8.0, 4.0], rotation=np.pi / 6)
model = gv.Spherical(sill=1.0, nugget=0.1, ball=ball)

corners = [(0, 0), (3, 1), (6, 0), (1, 5), (5, 6), (9, 4)]
blocks = [gv.Box(c, np.add(c, 2.0), shape=4) for c in corners]
centres = [gv.Point(np.add(c, 1.0)) for c in corners]

###############################################################################

block_mat = gv.pairwise(model, blocks)
point_mat = gv.pairwise(model, centres)
cross_mat = gv.pairwise(model, centres, blocks)

###############################################################################

fig, ax = plt.subplots(1, 3, figsize=(12, 3.5))

for axis, mat, title in zip(
    ax,
    (point_mat, block_mat, cross_mat),
    ("point to point", "block to block", "point to block"),
):
    img = axis.imshow(mat, vmin=0.0, vmax=model.sill)
    axis.set_title(title)
fig.colorbar(img, ax=ax.tolist(), shrink=0.8)
plt.show()
