import matplotlib.pyplot as plt
import pynoiseflow as nf

W, H = 800, 600

seeds = nf.noise.SeedSource(42)
flow = nf.noise.Noise2x2.from_seeds(seeds, pos_scale=100., normalize=True, bias=(0.4, 0.3))

palette = nf.palette.GradientPalette.from_colormap('magma').take(12)
color_noise = nf.noise.ScalarNoiseField.from_seed('simplex', seeds.next_seed(), scale=1000.)

canvas = nf.raster.Canvas(W, H, nf.palette.BLACK)

# curved walks, colored by a much coarser noise field
for start in nf.flow.random_points(seeds, 500, W, H):
    path = nf.flow.walk(flow, start, n_steps=300, step_size=4., bounds=canvas.size)
    color = nf.render.walk_color(color_noise, palette, start, 48.)
    canvas.stroke_path(path.polyline(4), color, width=2)

# tails on a coarse grid to show the underlying field
for start in nf.flow.grid_points(W, H, 64):
    canvas.stroke_path(nf.flow.tail(flow, start, 24).points, nf.palette.WHITE)

canvas.save('walks.png')

fig, ax = plt.subplots(figsize=(10, 7.5))
ax.imshow(canvas.to_array())
ax.set_axis_off()
plt.show()
