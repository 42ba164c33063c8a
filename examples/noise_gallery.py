import numpy as np
import matplotlib.pyplot as plt
import pynoiseflow as nf

nx, ny = 256, 256
xs, ys = np.arange(nx), np.arange(ny)

seeds = nf.noise.SeedSource(7)

fig, axes = plt.subplots(2, 3, figsize=(12, 8))

# one row per scale, one column per generator
for row, scale in enumerate([16., 64.]):
    for col, kind in enumerate(nf.noise.NOISE_KINDS):
        field = nf.noise.ScalarNoiseField.from_seed(kind, seeds.next_seed(), scale=scale)
        values = field.sample_grid(xs, ys)
        ax = axes[row, col]
        im = ax.imshow(values, cmap='RdBu_r', vmin=-1, vmax=1)
        ax.set_title(f'{kind}, scale {scale:g}')
        ax.set_axis_off()

fig.colorbar(im, ax=axes, shrink=0.6)

# the flow field itself, as the featherweight background
flow = nf.noise.Noise2x2.from_seeds(seeds, kind='perlin', pos_scale=50.)
vectors = flow.sample_grid(xs[::8], ys[::8])
fig2, ax2 = plt.subplots(figsize=(6, 6))
ax2.quiver(xs[::8], ys[::8], vectors[..., 0], vectors[..., 1])
ax2.invert_yaxis()
ax2.set_aspect('equal')

plt.show()
