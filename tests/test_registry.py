"""Tests for edgedraw.registry — gradient policy discovery."""

import pytest
from edgedraw.core.errors import UnsupportedMode
from edgedraw.core.types import GradientPolicy
from edgedraw.registry import all_policies, discover, get, resolve


class TestDiscover:
    def test_finds_both_policies(self):
        reg = discover()
        assert set(reg) >= {'grayscale', 'colour'}

    def test_values_are_policies(self):
        for policy in all_policies().values():
            assert isinstance(policy, GradientPolicy)

    def test_method_ids_unique(self):
        ids = [p.method for p in all_policies().values()]
        assert len(ids) == len(set(ids))


class TestResolve:
    @pytest.mark.parametrize(('key', 'name'), [(0, 'grayscale'), ('0', 'grayscale'), (1, 'colour'), (' 1 ', 'colour')])
    def test_by_id(self, key, name):
        assert resolve(key).name == name

    def test_by_name_case_insensitive(self):
        assert resolve('GrayScale').method == 0

    def test_unknown_id(self):
        with pytest.raises(UnsupportedMode, match='0 \\(grayscale\\)'):
            resolve(5)

    def test_unknown_name(self):
        with pytest.raises(UnsupportedMode):
            get('rgb')

    def test_bool_is_not_an_id(self):
        with pytest.raises(UnsupportedMode):
            resolve(True)
