"""Run, Dala Run! - a winter side-scroller starring a Swedish dala horse."""

__version__ = "1.0.0"
