"""seqfig — sequence diagram sources to LaTeX xymatrix figures."""

__version__ = "0.1.0"
