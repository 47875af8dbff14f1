from colour import Color

from ..constants import WeakIdeogramNamespace

DEFAULTS = WeakIdeogramNamespace()
"""
drawing defaults, each can be overridden by its IDEOGRAM_<NAME> environment variable

- width: the drawing width in pixels
- height: the drawing height in pixels
- title: the title drawn above the chromosome
- background_color: background color of the drawing
- backdrop_color: fill of the chromosome body behind the region bands
- outline_color: stroke color of the chromosome outline
- title_color: the title color
- axis_color: color of the scale axis, its ticks and tick labels
- legend_font_color: the legend label color
"""
DEFAULTS.add('width', 900)
DEFAULTS.add('height', 240)
DEFAULTS.add('title', 'Y Chromosome Regions')
DEFAULTS.add('background_color', '#1a1a1a')
DEFAULTS.add('backdrop_color', '#333333')
DEFAULTS.add('outline_color', '#666666')
DEFAULTS.add('title_color', '#e0e0e0')
DEFAULTS.add('axis_color', '#888888')
DEFAULTS.add('legend_font_color', '#cccccc')


class DiagramSettings:
    """
    holds settings related to colors/sizes for the drawing
    """
    def __init__(self, **kwargs):
        inputs = {}
        inputs.update(DEFAULTS.items())
        inputs.update(kwargs)
        for arg, val in inputs.items():
            if arg not in DEFAULTS:
                raise KeyError('unrecognized argument', arg)
            if arg.endswith('_color'):
                try:
                    Color(val)
                except (AttributeError, ValueError):
                    raise ValueError('invalid color', arg, val)
            setattr(self, arg, val)

        self.margin_x = 40
        self.title_y = 25
        self.title_font_size = 16

        self.ideogram_height = 40
        self.ideogram_y = 70
        self.ideogram_radius = self.ideogram_height / 2
        self.outline_stroke_width = 1
        self.clip_id = 'chromClip'
        self.region_min_width = 1  # zero length regions must still be visible

        self.marker_size = 6
        self.marker_y = self.ideogram_y - 15
        self.marker_min_spacing = 3

        self.scale_y = self.ideogram_y + self.ideogram_height + 20
        self.scale_tick_interval = 10000000
        self.scale_tick_size = 5
        self.scale_label_shift = 18
        self.scale_font_size = 10
        self.scale_stroke_width = 1

        self.legend_y = self.scale_y + 35
        self.legend_swatch_size = 12
        self.legend_swatch_radius = 2
        self.legend_font_size = 10
        self.legend_label_shift = 10
        # characters are not measured, each is assumed to take this many pixels
        self.legend_char_width = 6
        self.legend_spacing = 15
        self.variant_legend_offset = 280
        self.variant_legend_swatch_width = 6
        self.variant_legend_spacing = 25

    @property
    def drawable_width(self):
        return self.width - 2 * self.margin_x
