"""
draws chromosome ideograms (region bands, variant markers, scale and legends) as svg
"""
from .illustrate.diagram import render_ideogram  # noqa: F401
from .region import ChromosomeAnnotation, GenomicRegion, RenderOptions, VariantMarker  # noqa: F401
from .summary import render_stats_html, select_marker_variants, summarize  # noqa: F401

__version__ = '0.1.0'
