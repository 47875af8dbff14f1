"""
value objects describing the chromosome and the variants placed on it
"""
from collections import namedtuple
from types import MappingProxyType

from .constants import CHM13_CHRY_LENGTH, CONSENSUS_STATE, REGION_TYPE, VARIANT_STATUS


class GenomicRegion(namedtuple('GenomicRegion', ['start', 'end', 'name'])):
    """
    a named genomic interval. Coordinates are inclusive on both ends. Bounds are not
    checked against the chromosome so that malformed annotations can still be drawn
    """
    __slots__ = ()

    def __new__(cls, start, end, name=None):
        return super(GenomicRegion, cls).__new__(cls, int(start), int(end), name)

    def length(self):
        """
        Example:
            >>> GenomicRegion(10, 20).length()
            11
        """
        return self.end - self.start + 1

    def contains(self, position):
        return self.start <= position <= self.end


class VariantMarker(namedtuple('VariantMarker', ['position', 'status', 'label', 'consensus_state'])):
    """
    a called variant to be placed on the ideogram

    Attributes:
        position (int): genomic position of the variant
        status (VARIANT_STATUS): reconciliation status, decides the marker color and whether it is drawn
        label (str): optional variant name used in the tooltip
        consensus_state (CONSENSUS_STATE): optional consensus allele state, only used in summary counts
    """
    __slots__ = ()

    def __new__(cls, position, status, label=None, consensus_state=None):
        return super(VariantMarker, cls).__new__(cls, int(position), status, label, consensus_state)

    @classmethod
    def from_variant(cls, position, status, variant_name=None, canonical_name=None, consensus_state=None):
        """
        build a marker from a called variant record. The marker name is taken from the
        variant name and falls back to the canonical name

        Raises:
            TypeError: the status or consensus state is not part of its vocabulary
        """
        VARIANT_STATUS(status)
        if consensus_state is not None:
            CONSENSUS_STATE(consensus_state)
        return cls(position, status, variant_name or canonical_name, consensus_state)


class RenderOptions(namedtuple('RenderOptions', ['show_all_regions'])):
    """
    Attributes:
        show_all_regions (bool): reserved toggle, every whitelisted region type is currently drawn regardless
    """
    __slots__ = ()

    def __new__(cls, show_all_regions=True):
        return super(RenderOptions, cls).__new__(cls, bool(show_all_regions))


class ChromosomeAnnotation:
    """
    a linear chromosome and its typed sub-regions

    The regions are copied on construction so the annotation cannot be changed through
    the collections the caller passed in. Region order within a type is kept as given
    """

    def __init__(self, length, regions_by_type=None):
        """
        Args:
            length (int): total length of the chromosome in base pairs
            regions_by_type (dict of list of GenomicRegion by REGION_TYPE): the regions for each type
        """
        self.length = int(length)
        regions = {}
        for region_type, region_list in (regions_by_type or {}).items():
            regions[region_type] = tuple(region_list)
        self._regions = regions

    @property
    def regions_by_type(self):
        return MappingProxyType(self._regions)

    def present_types(self):
        """
        Returns:
            list of REGION_TYPE: the region types with at least one region, in input order
        """
        return [rtype for rtype, regions in self._regions.items() if regions]

    def region_count(self):
        return sum([len(regions) for regions in self._regions.values()])

    def __repr__(self):
        return '{}(length={}, regions={})'.format(
            self.__class__.__name__, self.length, {k: len(v) for k, v in self._regions.items()})

    @classmethod
    def from_regions(cls, typed_regions, length=None):
        """
        group a flat list of regions by type

        Args:
            typed_regions (Iterable of Tuple[REGION_TYPE,GenomicRegion]): the regions with their types
            length (int): the chromosome length. When not given the largest end of the
                PAR, heterochromatin and X-degenerate regions is used and when none of these are
                present the CHM13v2.0 Y chromosome length

        Returns:
            ChromosomeAnnotation: the annotation with each type sorted by start
        """
        grouped = {}
        for region_type, region in typed_regions:
            grouped.setdefault(region_type, []).append(region)
        for region_type in grouped:
            grouped[region_type].sort(key=lambda r: r.start)

        if length is None:
            ends = []
            for region_type in [REGION_TYPE.PAR, REGION_TYPE.HETEROCHROMATIN, REGION_TYPE.X_DEGENERATE]:
                ends.extend([r.end for r in grouped.get(region_type, [])])
            length = max(ends) if ends else CHM13_CHRY_LENGTH
        return cls(length, grouped)

    @classmethod
    def from_genome_regions(cls, data, chrom='chrY'):
        """
        convert a parsed genome regions record into an annotation

        The chromosome length is read from the record rather than derived from the largest
        region end, and a chromosome missing from the record is an error rather than an
        empty annotation

        Args:
            data (dict): the genome regions record. Chromosomes are listed under 'chromosomes' and
                each chromosome has a 'length', an optional 'centromere' and, for the Y chromosome,
                optional 'regions' and 'strMarkers' sections
            chrom (str): the chromosome to extract

        Raises:
            KeyError: the chromosome is not in the record
        """
        chr_data = data['chromosomes'][chrom]
        typed_regions = []

        if chr_data.get('centromere'):
            centromere = chr_data['centromere']
            typed_regions.append((
                REGION_TYPE.CENTROMERE, GenomicRegion(centromere['start'], centromere['end'], 'centromere')))

        yregions = chr_data.get('regions') or {}
        for par_name in ['par1', 'par2']:
            if yregions.get(par_name):
                region = yregions[par_name]
                typed_regions.append((
                    REGION_TYPE.PAR, GenomicRegion(region['start'], region['end'], par_name.upper())))
        for section, region_type in [
            ('xtr', REGION_TYPE.XTR),
            ('ampliconic', REGION_TYPE.AMPLICONIC),
            ('xDegenerate', REGION_TYPE.X_DEGENERATE),
        ]:
            for region in yregions.get(section) or []:
                typed_regions.append((region_type, GenomicRegion(region['start'], region['end'], region.get('type'))))
        for region in yregions.get('palindromes') or []:
            typed_regions.append((
                REGION_TYPE.PALINDROME, GenomicRegion(region['start'], region['end'], region['name'])))
        if yregions.get('heterochromatin'):
            region = yregions['heterochromatin']
            typed_regions.append((
                REGION_TYPE.HETEROCHROMATIN, GenomicRegion(region['start'], region['end'], 'Yq12')))

        for marker in chr_data.get('strMarkers') or []:
            typed_regions.append((REGION_TYPE.STR, GenomicRegion(marker['start'], marker['end'], marker['name'])))

        return cls.from_regions(typed_regions, length=chr_data['length'])
