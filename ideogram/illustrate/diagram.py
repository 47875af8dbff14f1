"""
This is the primary module responsible for generating the svg ideogram

"""
from svgwrite import Drawing

from .constants import DiagramSettings
from .elements import (
    chromosome_shape,
    draw_region_layers,
    draw_region_legend,
    draw_scale_axis,
    draw_variant_legend,
    draw_variant_markers,
)
from .util import CoordinateMapper
from ..region import RenderOptions
from ..util import DEVNULL


def draw_ideogram(config, annotation, variants=None, options=None, log=DEVNULL):
    """
    this is the main drawing function. The elements are added in a fixed order which is also
    their stacking order: title, chromosome backdrop, region bands (clipped to the chromosome
    body), outline, variant markers, scale axis and finally the two legends

    Args:
        config (DiagramSettings): the settings/constants to use for building the svg
        annotation (ChromosomeAnnotation): the chromosome and its regions
        variants (list of VariantMarker): variants to mark on the chromosome
        options (RenderOptions): rendering toggles
        log (callable): outputs logging information

    Returns:
        svgwrite.drawing.Drawing: the finished drawing

    Raises:
        ChromosomeLengthError: the annotation does not have a positive chromosome length
    """
    variants = [] if variants is None else list(variants)
    options = RenderOptions() if options is None else options
    mapping = CoordinateMapper(annotation.length, config.width, config.margin_x)

    canvas = Drawing(size=(config.width, config.height), style='background:{};'.format(config.background_color))
    canvas.viewbox(0, 0, config.width, config.height)
    clip_path = canvas.clipPath(id=config.clip_id)
    clip_path.add(chromosome_shape(config, canvas))
    canvas.defs.add(clip_path)

    canvas.add(canvas.text(
        config.title,
        insert=(config.width / 2, config.title_y),
        text_anchor='middle',
        fill=config.title_color,
        font_size=config.title_font_size,
        font_weight='bold',
        class_='title'
    ))
    canvas.add(chromosome_shape(config, canvas, fill=config.backdrop_color, class_='backdrop'))
    canvas.add(draw_region_layers(config, canvas, annotation, mapping))
    canvas.add(chromosome_shape(
        config, canvas,
        fill='none', stroke=config.outline_color, stroke_width=config.outline_stroke_width, class_='outline'
    ))
    canvas.add(draw_variant_markers(config, canvas, variants, mapping, log=log))
    canvas.add(draw_scale_axis(config, canvas, annotation.length, mapping))
    canvas.add(draw_region_legend(config, canvas, annotation.present_types()))
    canvas.add(draw_variant_legend(config, canvas))
    log('drew ideogram of length {} with {} regions (show_all_regions={})'.format(
        annotation.length, annotation.region_count(), options.show_all_regions))
    return canvas


def render_ideogram(annotation, variants=None, options=None, config=None, log=DEVNULL):
    """
    render the ideogram as an svg document string. Identical inputs always give an identical string

    Args:
        annotation (ChromosomeAnnotation): the chromosome and its regions
        variants (list of VariantMarker): variants to mark on the chromosome
        options (RenderOptions): rendering toggles
        config (DiagramSettings): drawing settings, the defaults are used when not given
        log (callable): outputs logging information

    Returns:
        str: the svg document
    """
    config = DiagramSettings() if config is None else config
    return draw_ideogram(config, annotation, variants, options, log=log).tostring()
