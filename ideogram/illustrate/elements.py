"""
functions drawing the individual components of the ideogram. Each returns an svg group
which the caller positions and adds to the drawing
"""
from .util import format_position, Tag
from ..constants import (
    DRAWN_VARIANT_STATUS,
    REGION_LAYER_ORDER,
    REGION_LEGEND,
    VARIANT_LEGEND,
    region_color,
    region_label,
    variant_color,
)
from ..util import DEVNULL


def chromosome_shape(config, canvas, **kwargs):
    """
    the rounded rectangle representing the chromosome body. Used for the backdrop, the clip path and the outline
    """
    return canvas.rect(
        (config.margin_x, config.ideogram_y),
        (config.drawable_width, config.ideogram_height),
        rx=config.ideogram_radius,
        ry=config.ideogram_radius,
        **kwargs
    )


def region_tooltip(region_type, region):
    """
    the tooltip of a region band, for example 'P1 (Palindrome): 18.00M - 18.50M'
    """
    label = region_label(region_type)
    return '{} ({}): {} - {}'.format(
        region.name if region.name else label, label, format_position(region.start), format_position(region.end))


def draw_region_layers(config, canvas, annotation, mapping):
    """
    draws the region bands in the fixed layer order. Region types missing from the layer
    order (STR) are never drawn, whatever the input

    Args:
        config (DiagramSettings): the settings/constants to use for building the svg
        canvas (svgwrite.drawing.Drawing): the main svgwrite object used to create new svg elements
        annotation (ChromosomeAnnotation): the chromosome regions
        mapping (CoordinateMapper): genomic to pixel conversion
    Return:
        svgwrite.container.Group: the group element holding the bands, clipped to the chromosome body
    """
    main_group = canvas.g(class_='regions', clip_path='url(#{})'.format(config.clip_id))
    regions_by_type = annotation.regions_by_type
    for region_type in REGION_LAYER_ORDER:
        for region in regions_by_type.get(region_type, []):
            x = mapping.pos_to_x(region.start)
            width = max(config.region_min_width, mapping.pos_to_x(region.end) - x)
            band = canvas.rect(
                (x, config.ideogram_y), (width, config.ideogram_height),
                fill=region_color(region_type),
                class_='region'
            )
            band.add(Tag('title', region_tooltip(region_type, region)))
            main_group.add(band)
    return main_group


def select_drawn_markers(variants, mapping, min_spacing):
    """
    picks the variants which get a marker. Only drawable statuses are kept, they are sorted by
    position (ties keep their input order) and a marker closer than the minimum spacing to the
    previously drawn marker is dropped

    Args:
        variants (Iterable of VariantMarker): the variants
        mapping (CoordinateMapper): genomic to pixel conversion
        min_spacing (float): minimum pixel distance between consecutive markers

    Returns:
        list of Tuple[VariantMarker,float]: the drawn variants with their pixel position
    """
    eligible = [v for v in variants if v.status in DRAWN_VARIANT_STATUS]
    last_x = float('-inf')
    drawn = []
    for variant in sorted(eligible, key=lambda v: v.position):
        x = mapping.pos_to_x(variant.position)
        if x - last_x >= min_spacing:
            drawn.append((variant, x))
            last_x = x
    return drawn


def draw_variant_markers(config, canvas, variants, mapping, log=DEVNULL):
    """
    draws a downward pointing triangle for each variant which survives the declutter step

    Return:
        svgwrite.container.Group: the group element for the markers
    """
    variants = list(variants)
    main_group = canvas.g(class_='markers')
    drawn = select_drawn_markers(variants, mapping, config.marker_min_spacing)
    half = config.marker_size / 2
    for variant, x in drawn:
        marker = canvas.polygon(
            [(x, config.marker_y + config.marker_size), (x - half, config.marker_y), (x + half, config.marker_y)],
            fill=variant_color(variant.status),
            stroke='none',
            class_='marker'
        )
        marker.add(Tag('title', '{} ({})'.format(
            variant.label if variant.label else 'pos:{}'.format(variant.position), variant.status)))
        main_group.add(marker)
    log('drew {} of {} variant markers'.format(len(drawn), len(variants)))
    return main_group


def generate_ticks(length, interval):
    """
    Args:
        length (int): the chromosome length
        interval (int): the distance between ticks

    Returns:
        list of int: tick positions from 0 up to and including the last multiple of the interval <= length

    Example:
        >>> generate_ticks(25000000, 10000000)
        [0, 10000000, 20000000]
    """
    if length < 0:
        return []
    return list(range(0, length + 1, interval))


def draw_scale_axis(config, canvas, length, mapping):
    """
    draws the axis line below the chromosome with a labelled tick every tick interval

    Return:
        svgwrite.container.Group: the group element for the axis
    """
    main_group = canvas.g(class_='scale')
    line_style = dict(stroke=config.axis_color, stroke_width=config.scale_stroke_width)
    main_group.add(canvas.line(
        (config.margin_x, config.scale_y), (config.width - config.margin_x, config.scale_y), **line_style))

    for pos in generate_ticks(length, config.scale_tick_interval):
        x = mapping.pos_to_x(pos)
        main_group.add(canvas.line((x, config.scale_y), (x, config.scale_y + config.scale_tick_size), **line_style))
        main_group.add(canvas.text(
            '{}M'.format(pos // 1000000),
            insert=(x, config.scale_y + config.scale_label_shift),
            text_anchor='middle',
            fill=config.axis_color,
            font_size=config.scale_font_size,
            class_='tick_label'
        ))
    return main_group


def draw_legend_label(config, canvas, label, x):
    return canvas.text(
        label,
        insert=(x, config.legend_y + config.legend_label_shift),
        fill=config.legend_font_color,
        font_size=config.legend_font_size,
        class_='label'
    )


def draw_region_legend(config, canvas, present_types):
    """
    legend of the region colors. Only whitelisted types which are present in the annotation are listed

    Args:
        present_types (Iterable of REGION_TYPE): region types found in the annotation
    Return:
        svgwrite.container.Group: the group element for the legend
    """
    present_types = set(present_types)
    main_group = canvas.g(class_='region_legend')
    x = config.margin_x
    for region_type, label in REGION_LEGEND:
        if region_type not in present_types:
            continue
        main_group.add(canvas.rect(
            (x, config.legend_y), (config.legend_swatch_size, config.legend_swatch_size),
            fill=region_color(region_type),
            rx=config.legend_swatch_radius,
            class_='swatch'
        ))
        main_group.add(draw_legend_label(config, canvas, label, x + config.legend_swatch_size + 4))
        x += config.legend_swatch_size + len(label) * config.legend_char_width + config.legend_spacing
    return main_group


def draw_variant_legend(config, canvas):
    """
    legend of the marker colors. Always lists every drawable status, whether or not it is in the input
    """
    main_group = canvas.g(class_='variant_legend')
    x = config.width - config.variant_legend_offset
    width = config.variant_legend_swatch_width
    for status, label in VARIANT_LEGEND:
        main_group.add(canvas.polygon(
            [
                (x + width / 2, config.legend_y + config.legend_swatch_size),
                (x, config.legend_y),
                (x + width, config.legend_y)
            ],
            fill=variant_color(status),
            class_='swatch'
        ))
        main_group.add(draw_legend_label(config, canvas, label, x + width + 4))
        x += len(label) * config.legend_char_width + config.variant_legend_spacing
    return main_group
