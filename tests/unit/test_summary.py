from ideogram.constants import CONSENSUS_STATE, REGION_TYPE, VARIANT_STATUS
from ideogram.region import VariantMarker
from ideogram.summary import render_stats_html, select_marker_variants, summarize

from ..util import build_annotation


VARIANTS = [
    VariantMarker(100, VARIANT_STATUS.CONFIRMED, consensus_state=CONSENSUS_STATE.DERIVED),
    VariantMarker(101, VARIANT_STATUS.CONFIRMED, consensus_state=CONSENSUS_STATE.ANCESTRAL),
    VariantMarker(102, VARIANT_STATUS.NOVEL, consensus_state=CONSENSUS_STATE.DERIVED),
    VariantMarker(500, VARIANT_STATUS.CONFLICT),
    VariantMarker(600, VARIANT_STATUS.PENDING, consensus_state=CONSENSUS_STATE.DERIVED),
]


class TestSummarize:
    def test_counts(self):
        annotation = build_annotation(PAR=[(1, 10), (900, 1000)], STR=[(50, 60, 'DYS19')], XTR=[])
        stats = summarize(annotation, VARIANTS)
        assert stats.derived == 3
        assert stats.confirmed == 2
        assert stats.novel == 1
        assert stats.conflict == 1
        assert stats.region_counts == [(REGION_TYPE.PAR, 2), (REGION_TYPE.STR, 1)]

    def test_decluttered_variants_still_counted(self):
        variants = [VariantMarker(500, VARIANT_STATUS.NOVEL) for _ in range(5)]
        assert summarize(build_annotation(), variants).novel == 5

    def test_empty(self):
        stats = summarize(build_annotation(), [])
        assert stats == (0, 0, 0, 0, [])


class TestSelectMarkerVariants:
    def test_derived_or_novel_or_conflict(self):
        assert [v.position for v in select_marker_variants(VARIANTS)] == [100, 102, 500, 600]

    def test_confirmed_ancestral_dropped(self):
        variants = [
            VariantMarker(1, VARIANT_STATUS.CONFIRMED, consensus_state=CONSENSUS_STATE.ANCESTRAL),
            VariantMarker(2, VARIANT_STATUS.PENDING),
        ]
        assert select_marker_variants(variants) == []

    def test_generator_input(self):
        assert len(select_marker_variants(v for v in VARIANTS)) == 4


class TestRenderStatsHtml:
    def test_fragment(self):
        annotation = build_annotation(PAR=[(1, 10), (900, 1000)], X_DEGENERATE=[(20, 40)])
        html = render_stats_html(annotation, VARIANTS)
        assert html.startswith('<div class="ideogram-stats"')
        assert html.endswith('</div>')
        assert '<span style="color: #4CAF50; font-weight: bold;">Derived: 3</span>' in html
        assert '<span style="color: #4CAF50;">Confirmed: 2</span>' in html
        assert '<span style="color: #2196F3;">Novel: 1</span>' in html
        assert '<span style="color: #F44336;">Conflict: 1</span>' in html
        assert 'Regions: PAR: 2 | X-degenerate: 1</div>' in html

    def test_no_regions(self):
        html = render_stats_html(build_annotation(), [])
        assert 'Regions: </div>' in html
        assert 'Derived: 0' in html
