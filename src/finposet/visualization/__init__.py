from .po_plot import POPlot

__all__ = ['POPlot']
