import json
import os

from ideogram.constants import REGION_TYPE
from ideogram.region import ChromosomeAnnotation, GenomicRegion

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')

SVG_NS = {'svg': 'http://www.w3.org/2000/svg'}


def get_data(*paths):
    return os.path.join(DATA_DIR, *paths)


def load_genome_regions(filename='chrY_regions.json'):
    with open(get_data(filename)) as fh:
        return json.load(fh)


def build_annotation(length=1000, **regions):
    """
    build an annotation from lists of (start, end[, name]) tuples given by REGION_TYPE key, ex. PAR=[(1, 10)]
    """
    regions_by_type = {}
    for key, intervals in regions.items():
        regions_by_type[REGION_TYPE[key]] = [GenomicRegion(*itvl) for itvl in intervals]
    return ChromosomeAnnotation(length, regions_by_type)


OUTPUT_SVG = int(os.environ.get('OUTPUT_SVG', 0))


def write_svg(svg, filename):
    """
    write the svg to the working directory when OUTPUT_SVG is set, for viewing rendered test output
    """
    if OUTPUT_SVG:
        with open(filename, 'w') as fh:
            fh.write(svg)
