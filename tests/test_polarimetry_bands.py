# -*- coding: utf-8 -*-
"""
Polarimetric Band Tests - Unit tests for sartbx.polarimetry.bands.

Covers matrix classification precedence, fixed-order band extraction for
full-pol and matrix products, coregistered stack grouping, stack band-name
write-back, and the polarization mode probe.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import random

# Third-party
import numpy as np
import pytest

# SARTBX
from sartbx.datamodel import metadata as meta
from sartbx.datamodel.product import Band, Product
from sartbx.datamodel.stack import (
    get_master_band_names,
    get_slave_band_names,
    save_master_product_band_names,
    save_slave_product_band_names,
)
from sartbx.exceptions import (
    BandLookupError,
    ClassificationError,
    OperatorError,
    ValidationError,
)
from sartbx.polarimetry.bands import (
    SourceBandGroup,
    classify_band_names,
    get_band_names,
    get_bands,
    get_c2_band_names,
    get_c3_band_names,
    get_c4_band_names,
    get_g4_band_names,
    get_lch_mode_s2_band_names,
    get_polar_type,
    get_rch_mode_s2_band_names,
    get_source_bands,
    get_source_product_type,
    get_t3_band_names,
    get_t4_band_names,
    save_new_band_names,
)
from sartbx.vocabulary import MatrixType


# ===================================================================
# Helpers
# ===================================================================

_QUAD_POL_BANDS = [
    ('i_HH', 'real'), ('q_HH', 'imaginary'),
    ('i_HV', 'real'), ('q_HV', 'imaginary'),
    ('i_VH', 'real'), ('q_VH', 'imaginary'),
    ('i_VV', 'real'), ('q_VV', 'imaginary'),
]


def _make_product(names, unit=None, name='test_product'):
    return Product(name, 'SLC', [Band(n, unit=unit) for n in names])


def _make_quad_pol_product(bands=_QUAD_POL_BANDS, suffix=''):
    product = Product('quad', 'SLC')
    for name, unit in bands:
        product.add_band(Band(name + suffix, unit=unit))
    return product


def _make_stack(table, suffixes):
    """Stack whose master uses suffixes[0] and slaves the rest."""
    product = Product('stack', 'C3')
    abs_root = meta.add_abstracted_metadata(product)
    abs_root.set_attribute_int(meta.COREGISTERED_STACK, 1)

    names_per_product = []
    for suffix in suffixes:
        names = [f"{n}_{suffix}" for n in table]
        for n in names:
            product.add_band(Band(n))
        names_per_product.append(names)

    save_master_product_band_names(product, names_per_product[0])
    for i, names in enumerate(names_per_product[1:], start=1):
        save_slave_product_band_names(product, f"slave{i}", names)
    return product


# ===================================================================
# Band name tables
# ===================================================================

class TestBandNameTables:

    def test_table_lengths(self):
        assert len(get_c2_band_names()) == 4
        assert len(get_c3_band_names()) == 9
        assert len(get_t3_band_names()) == 9
        assert len(get_c4_band_names()) == 16
        assert len(get_t4_band_names()) == 16
        assert len(get_lch_mode_s2_band_names()) == 4
        assert len(get_rch_mode_s2_band_names()) == 4
        assert get_g4_band_names() == ['g0', 'g1', 'g2', 'g3']

    def test_c3_order(self):
        assert get_c3_band_names() == [
            'C11', 'C12_real', 'C12_imag', 'C13_real', 'C13_imag',
            'C22', 'C23_real', 'C23_imag', 'C33',
        ]

    def test_t4_mirrors_c4(self):
        t4 = get_t4_band_names()
        assert t4[0] == 'T11'
        assert t4[-1] == 'T44'
        assert [n[1:] for n in t4] == [n[1:] for n in get_c4_band_names()]

    def test_compact_pol_names(self):
        assert get_lch_mode_s2_band_names() == ['i_LH', 'q_LH', 'i_LV', 'q_LV']
        assert get_rch_mode_s2_band_names() == ['i_RH', 'q_RH', 'i_RV', 'q_RV']

    def test_accessor_by_kind(self):
        assert get_band_names(MatrixType.C3) == get_c3_band_names()
        assert get_band_names(MatrixType.RCHCP) == get_rch_mode_s2_band_names()

    def test_full_has_no_table(self):
        with pytest.raises(ValidationError):
            get_band_names(MatrixType.FULL)

    def test_tables_are_copies(self):
        names = get_c3_band_names()
        names.clear()
        assert len(get_c3_band_names()) == 9


# ===================================================================
# Classification
# ===================================================================

class TestClassification:

    @pytest.mark.parametrize('matrix_type', [
        MatrixType.C2, MatrixType.C3, MatrixType.C4,
        MatrixType.T3, MatrixType.T4,
        MatrixType.LCHCP, MatrixType.RCHCP,
    ])
    def test_canonical_tables(self, matrix_type):
        assert classify_band_names(get_band_names(matrix_type)) == matrix_type

    def test_c3_any_order_with_unrelated_names(self):
        rng = random.Random(7)
        for _ in range(20):
            names = get_c3_band_names() + ['Intensity', 'Amplitude', 'mask']
            rng.shuffle(names)
            assert classify_band_names(names) == MatrixType.C3

    def test_t44_wins_over_c33(self):
        names = ['C33', 'C22', 'T44', 'C11']
        assert classify_band_names(names) == MatrixType.T4

    def test_c44_short_circuits(self):
        assert classify_band_names(['C44', 'T44']) == MatrixType.C4
        assert classify_band_names(['T44', 'C44']) == MatrixType.T4

    def test_precedence_c3_over_t3_and_c2(self):
        assert classify_band_names(['C22', 'T33', 'C33']) == MatrixType.C3
        assert classify_band_names(['C22', 'T33']) == MatrixType.T3
        assert classify_band_names(['i_LH', 'C22']) == MatrixType.C2
        assert classify_band_names(['i_RH', 'i_LH']) == MatrixType.LCHCP

    def test_default_full(self):
        names = [n for n, _ in _QUAD_POL_BANDS]
        assert classify_band_names(names) == MatrixType.FULL
        assert classify_band_names([]) == MatrixType.FULL

    def test_product_classification(self):
        product = _make_product(get_t3_band_names())
        assert get_source_product_type(product) == MatrixType.T3


# ===================================================================
# Full-pol extraction
# ===================================================================

class TestQuadPolExtraction:

    def test_slot_order(self):
        shuffled = list(_QUAD_POL_BANDS)
        random.Random(3).shuffle(shuffled)
        product = _make_quad_pol_product(shuffled)
        bands = get_bands(product, MatrixType.FULL, product.get_band_names())
        assert [b.name for b in bands] == [n for n, _ in _QUAD_POL_BANDS]

    def test_non_complex_bands_skipped(self):
        product = _make_quad_pol_product()
        product.add_band(Band('Intensity_HH', unit='intensity'))
        product.add_band(Band('Amplitude_VV', unit='amplitude'))
        groups = get_source_bands(product, MatrixType.FULL)
        assert len(groups[0].src_bands) == 8

    def test_missing_vv_imaginary(self):
        product = _make_quad_pol_product(_QUAD_POL_BANDS[:7])
        with pytest.raises(ClassificationError, match='full polarization'):
            get_source_bands(product, MatrixType.FULL)

    def test_duplicate_slot(self):
        product = _make_quad_pol_product(
            _QUAD_POL_BANDS + [('i2_HH', 'real')]
        )
        with pytest.raises(ClassificationError):
            get_source_bands(product, MatrixType.FULL)

    def test_bands_without_polarization_skipped(self):
        """Bands without a resolvable polarization fill no slot."""
        product = _make_product(['i', 'q'], unit='real')
        with pytest.raises(ClassificationError):
            get_source_bands(product, MatrixType.FULL)


# ===================================================================
# Matrix extraction
# ===================================================================

class TestMatrixExtraction:

    def test_c3_canonical_order_regardless_of_input(self):
        names = get_c3_band_names()
        rng = random.Random(11)
        for _ in range(10):
            shuffled = list(names)
            rng.shuffle(shuffled)
            product = _make_product(shuffled)
            groups = get_source_bands(product, MatrixType.C3)
            assert [b.name for b in groups[0].src_bands] == names

    def test_unrelated_bands_skipped(self):
        product = _make_product(['Intensity'] + get_c2_band_names() + ['mask'])
        groups = get_source_bands(product, MatrixType.C2)
        assert [b.name for b in groups[0].src_bands] == get_c2_band_names()

    def test_missing_table_entry(self):
        product = _make_product(get_c3_band_names()[:-1])
        with pytest.raises(ClassificationError, match='polarimetric matrix'):
            get_source_bands(product, MatrixType.C3)

    def test_duplicate_table_entry(self):
        product = _make_product(get_c2_band_names() + ['C11_copy'])
        with pytest.raises(ClassificationError):
            get_source_bands(product, MatrixType.C2)

    def test_missing_band_is_lookup_error(self):
        product = _make_product(get_c2_band_names())
        with pytest.raises(BandLookupError, match='Band C33 not found'):
            get_bands(product, MatrixType.C2, ['C11', 'C33'])

    def test_errors_are_operator_errors(self):
        assert issubclass(ClassificationError, OperatorError)
        assert issubclass(BandLookupError, OperatorError)

    def test_band_handles_are_shared(self):
        product = _make_product(get_c2_band_names())
        groups = get_source_bands(product, MatrixType.C2)
        assert groups[0].src_bands[0] is product.get_band('C11')


# ===================================================================
# Stacks
# ===================================================================

class TestStacks:

    def test_non_stack_single_group(self):
        product = _make_product(get_c3_band_names())
        groups = get_source_bands(product, MatrixType.C3)
        assert len(groups) == 1
        assert groups[0].suffix == ''
        assert groups[0].product_name == 'test_product'

    def test_three_product_stack(self):
        suffixes = ['mst_01Jan2020', 'slv1_13Jan2020', 'slv2_25Jan2020']
        product = _make_stack(get_c3_band_names(), suffixes)
        groups = get_source_bands(product, MatrixType.C3)

        assert len(groups) == 3
        assert [g.suffix for g in groups] == [
            '01Jan2020', '13Jan2020', '25Jan2020',
        ]
        assert [g.product_name for g in groups] == ['stack', 'slave1', 'slave2']
        assert groups[1].src_bands[0].name == 'C11_slv1_13Jan2020'
        for group in groups:
            assert len(group.src_bands) == 9

    def test_stack_suffix_matches_first_band(self):
        product = _make_stack(get_c2_band_names(), ['a_X', 'b_Y'])
        groups = get_source_bands(product, MatrixType.C2)
        for group in groups:
            first = group.src_bands[0].name
            assert group.suffix == first[first.rfind('_') + 1:]

    def test_stack_slave_missing_band(self):
        product = _make_stack(get_c2_band_names(), ['mst_A', 'slv_B'])
        product.remove_band(product.get_band('C22_slv_B'))
        with pytest.raises(BandLookupError):
            get_source_bands(product, MatrixType.C2)

    @pytest.mark.parametrize('matrix_type, table', [
        (MatrixType.C2, get_c2_band_names()),
        (MatrixType.T3, get_t3_band_names()),
    ])
    def test_stack_slave_without_bands(self, matrix_type, table):
        product = _make_stack(table, ['mst_A'])
        save_slave_product_band_names(product, 'slave1', [])
        with pytest.raises(BandLookupError, match='slave1'):
            get_source_bands(product, matrix_type)

    def test_full_pol_stack(self):
        product = Product('quad_stack', 'SLC')
        meta.add_abstracted_metadata(product).set_attribute_int(
            meta.COREGISTERED_STACK, 1,
        )
        for suffix in ('_mst_01Jan2020', '_slv1_13Jan2020'):
            for name, unit in _QUAD_POL_BANDS:
                product.add_band(Band(name + suffix, unit=unit))
        save_master_product_band_names(
            product, [n for n in product.get_band_names() if '_mst' in n],
        )
        save_slave_product_band_names(
            product, 'slave1',
            [n for n in product.get_band_names() if '_slv1' in n],
        )
        groups = get_source_bands(product, MatrixType.FULL)
        assert len(groups) == 2
        assert groups[1].src_bands[7].name == 'q_VV_slv1_13Jan2020'


# ===================================================================
# Write-back
# ===================================================================

class TestSaveNewBandNames:

    def test_noop_for_non_stack(self):
        target = _make_product(['out'])
        group = SourceBandGroup('src', [], '')
        group.add_target_bands([Band('out')])
        save_new_band_names(target, [group])
        assert target.get_metadata_root().get_element(
            meta.SLAVE_METADATA_ROOT) is None

    def test_master_then_slaves(self):
        target = Product('target', 'T3')
        meta.add_abstracted_metadata(target).set_attribute_int(
            meta.COREGISTERED_STACK, 1,
        )
        groups = []
        for product_name, suffix in [('stack', 'A'), ('s1', 'B'), ('s2', 'C')]:
            group = SourceBandGroup(product_name, [], suffix)
            group.add_target_bands([Band(f'T11_{suffix}'), Band(f'T22_{suffix}')])
            groups.append(group)

        save_new_band_names(target, groups)

        assert get_master_band_names(target) == ['T11_A', 'T22_A']
        assert get_slave_band_names(target, 's1') == ['T11_B', 'T22_B']
        assert get_slave_band_names(target, 's2') == ['T11_C', 'T22_C']

    def test_missing_target_bands(self):
        target = Product('target', 'T3')
        meta.add_abstracted_metadata(target).set_attribute_int(
            meta.COREGISTERED_STACK, 1,
        )
        with pytest.raises(ValidationError):
            save_new_band_names(target, [SourceBandGroup('stack', [], '')])


# ===================================================================
# SourceBandGroup
# ===================================================================

class TestSourceBandGroup:

    def test_defaults(self):
        group = SourceBandGroup('p', [], '')
        assert group.target_bands is None
        assert group.span_min == 1e+30
        assert group.span_max == -1e+30
        assert not group.span_min_max_set

    def test_update_span(self):
        group = SourceBandGroup('p', [], '')
        group.update_span(np.array([[1.0, np.nan], [5.0, 2.0]]))
        group.update_span(np.array([0.5, np.inf]))
        assert group.span_min == 0.5
        assert group.span_max == 5.0
        assert group.span_min_max_set

    def test_update_span_all_nan(self):
        group = SourceBandGroup('p', [], '')
        group.update_span(np.full((2, 2), np.nan))
        assert not group.span_min_max_set


# ===================================================================
# Polarization mode
# ===================================================================

class TestPolarType:

    def _product(self, pols):
        product = Product('p', 'SLC')
        abs_root = meta.add_abstracted_metadata(product)
        for name, pol in zip(meta.MDS_TX_RX_POLARS, pols):
            abs_root.set_attribute_string(name, pol)
        return product

    def test_full(self):
        assert get_polar_type(self._product(['HH', 'HV', 'VH', 'VV'])) == 'full'

    def test_dual(self):
        assert get_polar_type(self._product(['VV', 'VH'])) == 'dual'

    def test_single(self):
        assert get_polar_type(self._product([])) == 'single'
        assert get_polar_type(self._product(['VV'])) == 'single'

    def test_three_is_dual(self):
        assert get_polar_type(self._product(['HH', 'HV', 'VH'])) == 'dual'

    def test_no_abstracted_metadata(self):
        assert get_polar_type(Product('p')) == 'single'
