"""Tests for ValueKind dispatch."""

import pytest

from httphelpers.requests import ValueKind


class TestValueKind:
    def test_every_list_kind_has_a_scalar_element(self):
        for kind in ValueKind:
            if kind.is_sequence:
                assert not kind.element.is_sequence
            else:
                assert kind.element is kind

    def test_zero_lists_are_fresh(self):
        first = ValueKind.INT_LIST.zero()
        first.append(1)
        assert ValueKind.INT_LIST.zero() == []

    @pytest.mark.parametrize(
        ("kind", "zero"),
        [(ValueKind.INT, 0), (ValueKind.FLOAT32, 0.0), (ValueKind.STRING, ""), (ValueKind.BOOL, False)],
    )
    def test_scalar_zeros(self, kind, zero):
        assert kind.zero() == zero
        assert type(kind.zero()) is type(zero)

    def test_parse_uses_element_parser(self):
        assert ValueKind.UINT32_LIST.parse("7") == 7
        with pytest.raises(ValueError):
            ValueKind.UINT32_LIST.parse("-7")
