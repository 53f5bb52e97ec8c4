"""
Visualization package.

- src.visualization.plots.render_figures() : build, save or display every
  chart whose required columns are present
"""
