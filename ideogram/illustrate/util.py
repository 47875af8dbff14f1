from decimal import Decimal, ROUND_HALF_UP

import svgwrite

from ..error import ChromosomeLengthError


class CoordinateMapper:
    """
    linear conversion of genomic positions to pixel x-coordinates on the drawing

    Example:
        >>> mapper = CoordinateMapper(1000, 900, 40)
        >>> mapper.pos_to_x(500)
        450.0
    """

    def __init__(self, length, width, margin):
        """
        Args:
            length (int): chromosome length
            width (int): total drawing width in pixels
            margin (int): margin (pixels) left on each side of the drawable area

        Raises:
            ChromosomeLengthError: the chromosome length is not a positive number
        """
        if length is None or length <= 0:
            raise ChromosomeLengthError('chromosome length must be a positive integer', length)
        self.length = length
        self.margin = margin
        self.drawable_width = width - 2 * margin

    def pos_to_x(self, pos):
        """
        Returns:
            float: the pixel position, not rounded
        """
        return self.margin + (pos / self.length) * self.drawable_width


def format_position(pos):
    """
    abbreviate a genomic position for display. Ties are rounded half up, so 2125000 is shown as 2.13M

    Example:
        >>> format_position(2781479)
        '2.78M'
        >>> format_position(10500)
        '10.5K'
        >>> format_position(999)
        '999'
    """
    if pos >= 1000000:
        return '{}M'.format((Decimal(pos) / 1000000).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))
    elif pos >= 1000:
        return '{}K'.format((Decimal(pos) / 1000).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))
    return str(pos)


class Tag(svgwrite.base.BaseElement):

    def __init__(self, elementname, content='', **kwargs):
        self.elementname = elementname
        super(Tag, self).__init__(**kwargs)
        self.content = content

    def get_xml(self):
        xml = super(Tag, self).get_xml()
        xml.text = self.content
        return xml
