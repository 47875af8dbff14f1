import pytest

from ideogram.constants import (
    DEFAULT_REGION_COLOR,
    DEFAULT_VARIANT_COLOR,
    DRAWN_VARIANT_STATUS,
    REGION_COLOR,
    REGION_LAYER_ORDER,
    REGION_LEGEND,
    REGION_TYPE,
    VARIANT_COLOR,
    VARIANT_LEGEND,
    VARIANT_STATUS,
    IdeogramNamespace,
    check_vocabulary_coverage,
    region_color,
    region_label,
    variant_color,
)


class TestIdeogramNamespace:
    def test_attribute_access(self):
        nspace = IdeogramNamespace(thing=1, otherthing=2)
        assert nspace.thing == 1
        assert nspace['otherthing'] == 2
        assert nspace.keys() == ['thing', 'otherthing']
        assert nspace.values() == [1, 2]

    def test_respecify_error(self):
        with pytest.raises(AttributeError):
            IdeogramNamespace('thing', thing=1)

    def test_enforce(self):
        assert REGION_TYPE.enforce('XTR') == 'XTR'
        with pytest.raises(KeyError):
            REGION_TYPE.enforce('Cytoband')

    def test_call_casts_to_member(self):
        assert VARIANT_STATUS('NOVEL') == VARIANT_STATUS.NOVEL
        with pytest.raises(TypeError):
            VARIANT_STATUS('NO_COVERAGE')

    def test_env_override_requires_flag(self, monkeypatch):
        nspace = IdeogramNamespace()
        nspace.add('width', 900)
        nspace.add('height', 240, env_overwritable=True)
        monkeypatch.setenv('IDEOGRAM_WIDTH', '1000')
        monkeypatch.setenv('IDEOGRAM_HEIGHT', '300')
        assert nspace.width == 900
        assert nspace.height == 300

    def test_env_override_boolean(self, monkeypatch):
        nspace = IdeogramNamespace()
        nspace.add('show_all_regions', True, env_overwritable=True)
        monkeypatch.setenv('IDEOGRAM_SHOW_ALL_REGIONS', 'no')
        assert nspace.show_all_regions is False

    def test_private_set_error(self):
        with pytest.raises(ValueError):
            IdeogramNamespace()._thing = 1


class TestDisplayTables:
    def test_every_region_type_has_a_color(self):
        for region_type in REGION_TYPE.values():
            assert region_type in REGION_COLOR

    def test_every_status_has_a_color(self):
        for status in VARIANT_STATUS.values():
            assert status in VARIANT_COLOR

    def test_str_is_never_layered_or_listed(self):
        assert REGION_TYPE.STR not in REGION_LAYER_ORDER
        assert REGION_TYPE.STR not in [rtype for rtype, _ in REGION_LEGEND]

    def test_layer_order_starts_with_background_types(self):
        assert REGION_LAYER_ORDER[:3] == (
            REGION_TYPE.X_DEGENERATE, REGION_TYPE.HETEROCHROMATIN, REGION_TYPE.CENTROMERE)

    def test_pending_is_not_drawn(self):
        assert VARIANT_STATUS.PENDING not in DRAWN_VARIANT_STATUS
        assert [status for status, _ in VARIANT_LEGEND] == list(DRAWN_VARIANT_STATUS)

    def test_fallback_colors(self):
        assert region_color(REGION_TYPE.PAR) == '#6B8E23'
        assert region_color('Cytoband') == DEFAULT_REGION_COLOR
        assert variant_color(VARIANT_STATUS.CONFLICT) == '#F44336'
        assert variant_color('NO_COVERAGE') == DEFAULT_VARIANT_COLOR

    def test_region_label(self):
        assert region_label(REGION_TYPE.X_DEGENERATE) == 'X-degenerate'
        assert region_label('Cytoband') == 'Cytoband'


class TestCheckVocabularyCoverage:
    def test_complete(self):
        check_vocabulary_coverage(VARIANT_STATUS, ['CONFIRMED', 'NOVEL'], ['CONFLICT', 'PENDING'])

    def test_missing_member(self):
        with pytest.raises(KeyError):
            check_vocabulary_coverage(VARIANT_STATUS, ['CONFIRMED', 'NOVEL', 'CONFLICT'])

    def test_unknown_member(self):
        with pytest.raises(KeyError):
            check_vocabulary_coverage(VARIANT_STATUS, VARIANT_STATUS.values() + ['NO_COVERAGE'])

    def test_covered_and_excluded(self):
        with pytest.raises(KeyError):
            check_vocabulary_coverage(VARIANT_STATUS, VARIANT_STATUS.values(), ['PENDING'])
