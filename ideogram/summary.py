"""
counts shown alongside the ideogram. These are computed from the inputs directly and not
from the drawing, so variants hidden by the marker declutter step are still counted
"""
from collections import namedtuple
from html import escape

from .constants import CONSENSUS_STATE, VARIANT_STATUS, region_label, variant_color


class StatsSummary(namedtuple('StatsSummary', ['derived', 'confirmed', 'novel', 'conflict', 'region_counts'])):
    """
    Attributes:
        derived (int): variants in the derived consensus state, whatever their status
        confirmed (int): variants with the CONFIRMED status
        novel (int): variants with the NOVEL status
        conflict (int): variants with the CONFLICT status
        region_counts (list of Tuple[REGION_TYPE,int]): number of regions for each type present in the annotation
    """
    __slots__ = ()


def summarize(annotation, variants):
    """
    Args:
        annotation (ChromosomeAnnotation): the chromosome regions
        variants (Iterable of VariantMarker): all variants, including those which are never drawn

    Returns:
        StatsSummary: the counts
    """
    variants = list(variants)
    region_counts = [
        (region_type, len(annotation.regions_by_type[region_type])) for region_type in annotation.present_types()
    ]
    return StatsSummary(
        derived=len([v for v in variants if v.consensus_state == CONSENSUS_STATE.DERIVED]),
        confirmed=len([v for v in variants if v.status == VARIANT_STATUS.CONFIRMED]),
        novel=len([v for v in variants if v.status == VARIANT_STATUS.NOVEL]),
        conflict=len([v for v in variants if v.status == VARIANT_STATUS.CONFLICT]),
        region_counts=region_counts
    )


def select_marker_variants(variants):
    """
    picks the variants worth marking on the ideogram: those in the derived consensus state and
    any NOVEL or CONFLICT call. The stats summary is still built from the full list

    Args:
        variants (Iterable of VariantMarker): all variants

    Returns:
        list of VariantMarker: the variants to pass to the renderer, in input order
    """
    return [
        v for v in variants
        if v.consensus_state == CONSENSUS_STATE.DERIVED or v.status in [VARIANT_STATUS.NOVEL, VARIANT_STATUS.CONFLICT]
    ]


def render_stats_html(annotation, variants):
    """
    render the summary as a small html fragment which can be placed below the svg

    Returns:
        str: the html fragment
    """
    stats = summarize(annotation, variants)
    separator = ' &nbsp;|&nbsp;\n'
    counts = separator.join([
        '  <span style="color: {}; font-weight: bold;">Derived: {}</span>'.format(
            variant_color(VARIANT_STATUS.CONFIRMED), stats.derived),
        '  <span style="color: {};">Confirmed: {}</span>'.format(
            variant_color(VARIANT_STATUS.CONFIRMED), stats.confirmed),
        '  <span style="color: {};">Novel: {}</span>'.format(variant_color(VARIANT_STATUS.NOVEL), stats.novel),
        '  <span style="color: {};">Conflict: {}</span>'.format(
            variant_color(VARIANT_STATUS.CONFLICT), stats.conflict),
    ])
    regions = ' | '.join(['{}: {}'.format(escape(region_label(rtype)), count) for rtype, count in stats.region_counts])
    lines = [
        '<div class="ideogram-stats" style="margin-top: 15px; padding: 10px; background: #2a2a2a; '
        'border-radius: 5px; font-size: 12px; color: #cccccc;">',
        counts,
        '  <div style="margin-top: 8px; font-size: 11px; color: #888888;">Regions: {}</div>'.format(regions),
        '</div>'
    ]
    return '\n'.join(lines)
