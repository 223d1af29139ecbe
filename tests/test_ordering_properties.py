# SPDX-License-Identifier: MIT
"""Property-based tests for version ordering.

These tests verify that:
- Every string compares equal to itself
- Swapping the operands reverses the result
- Leading zeros never change a numeric segment
- Dotted numeric versions order like tuples of integers
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from alpmver import Ordering, Version, compose, decompose, total_compare, vercmp


# =============================================================================
# Strategies for generating test data
# =============================================================================

# Characters that exercise every branch: digits, letters, separators, epoch
version_alphabet = st.sampled_from(list("0129abzAZ.-_:~+"))

version_like = st.text(alphabet=version_alphabet, max_size=16)

# Arbitrary text, including non-ASCII letters and digits
any_text = st.text(max_size=16)

numeric_parts = st.lists(st.integers(min_value=0, max_value=10**6), min_size=1, max_size=5)


def _dotted(parts: list[int], width: int = 0) -> str:
    return ".".join(str(n).zfill(width) for n in parts)


# =============================================================================
# Properties
# =============================================================================


class TestReflexivity:
    @given(text=st.one_of(version_like, any_text))
    def test_vercmp_reflexive(self, text: str) -> None:
        assert vercmp(text, text) is Ordering.EQUAL

    @given(text=version_like)
    def test_total_compare_reflexive(self, text: str) -> None:
        assert total_compare(text, text) is Ordering.EQUAL
        assert Version(text) == Version(text)


class TestAntisymmetry:
    @given(a=st.one_of(version_like, any_text), b=st.one_of(version_like, any_text))
    @settings(max_examples=300)
    def test_vercmp_antisymmetric(self, a: str, b: str) -> None:
        assert vercmp(a, b) is vercmp(b, a).reverse()

    @given(a=version_like, b=version_like)
    @settings(max_examples=300)
    def test_total_compare_antisymmetric(self, a: str, b: str) -> None:
        assert total_compare(a, b) is total_compare(b, a).reverse()


class TestNumericSegments:
    @given(parts=numeric_parts, width=st.integers(min_value=1, max_value=8))
    def test_leading_zeros_ignored(self, parts: list[int], width: int) -> None:
        assert vercmp(_dotted(parts), _dotted(parts, width)) is Ordering.EQUAL

    @given(left=numeric_parts, right=numeric_parts)
    def test_dotted_numbers_order_like_tuples(self, left: list[int], right: list[int]) -> None:
        assert vercmp(_dotted(left), _dotted(right)) is Ordering.of(left, right)


class TestDecomposition:
    @given(text=version_like)
    def test_epoch_never_empty(self, text: str) -> None:
        assert decompose(text).epoch != ""

    @given(text=version_like)
    def test_release_missing_only_without_dash(self, text: str) -> None:
        components = decompose(text)
        if components.release is None:
            assert "-" not in components.version
        else:
            assert "-" not in components.release

    @given(text=version_like)
    def test_composed_string_has_release(self, text: str) -> None:
        assert decompose(compose(decompose(text))).release is not None
