"""Matplotlib visualizations of integration runs."""

from adaptquad.visual.quadrature_plot import plot_evaluation_points

__all__ = ["plot_evaluation_points"]
