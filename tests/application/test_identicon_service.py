"""Tests for IdenticonService."""

import pytest

from identicons_svg.application.services import IdenticonService, OptionsFactory
from identicons_svg.domain import (
    InsufficientBitData,
    InvalidHashFormat,
    RenderOptions,
    extract_bits,
    render,
)
from identicons_svg.infrastructure.randomness import SystemRandomness


class TestGenerate:
    """Tests for deterministic generation."""

    def test_matches_pipeline(self, identicon_service, sample_hash, plain_options):
        """Test generate equals render(extract_bits(hash))."""
        expected = render(extract_bits(sample_hash), plain_options)
        assert identicon_service.generate(sample_hash, plain_options) == expected

    def test_does_not_use_randomness(
        self, identicon_service, fake_randomness, sample_hash, plain_options
    ):
        """Test fixed inputs never touch the randomness port."""
        identicon_service.generate(sample_hash, plain_options)
        assert fake_randomness.choices_calls == []
        assert fake_randomness.range_calls == []
        assert fake_randomness.color_calls == 0

    def test_create_keeps_grid(self, identicon_service, sample_hash, plain_options):
        """Test create exposes the grid behind the document."""
        icon = identicon_service.create(sample_hash, plain_options)

        assert icon.hash == sample_hash
        assert icon.options == plain_options
        assert icon.grid.size == 5
        assert icon.svg.count("<rect") == icon.grid.filled_count

    def test_invalid_hash_propagates(self, identicon_service, plain_options):
        """Test hash errors reach the caller."""
        with pytest.raises(InvalidHashFormat):
            identicon_service.generate("zz", plain_options)

    def test_insufficient_bits_propagates(self, identicon_service):
        """Test short hashes for large grids reach the caller."""
        with pytest.raises(InsufficientBitData):
            identicon_service.generate("ab", RenderOptions(size=6, color="red"))


class TestGenerateRandom:
    """Tests for generation with defaults."""

    def test_fills_missing_inputs(self, identicon_service, fake_randomness):
        """Test hash, size and color come from the port."""
        icon = identicon_service.generate_random()

        assert icon.hash == "abcdefghijklmno".encode("ascii").hex()
        assert icon.options.size == 4
        assert icon.options.color == "#123456"
        assert icon.options.background is not None

    def test_keeps_given_hash(self, identicon_service, fake_randomness):
        """Test a supplied hash is used as is."""
        icon = identicon_service.generate_random(hash_value="ffff", size=2, color="red")

        assert icon.hash == "ffff"
        assert fake_randomness.choices_calls == []

    def test_seeded_randomness_is_reproducible(self):
        """Test equal seeds produce equal identicons."""
        first = IdenticonService(OptionsFactory(SystemRandomness(42))).generate_random()
        second = IdenticonService(OptionsFactory(SystemRandomness(42))).generate_random()
        assert first == second


class TestBatch:
    """Tests for batch generation."""

    def test_yields_count_items(self, identicon_service):
        """Test the batch has the requested length."""
        assert len(list(identicon_service.generate_batch(3))) == 3

    def test_is_lazy(self, identicon_service, fake_randomness):
        """Test nothing is generated before iteration."""
        batch = identicon_service.generate_batch(5)
        assert fake_randomness.choices_calls == []
        next(batch)
        assert fake_randomness.choices_calls == [15]

    def test_zero_count(self, identicon_service):
        """Test an empty batch."""
        assert list(identicon_service.generate_batch(0)) == []

    def test_negative_count_raises(self, identicon_service):
        """Test negative counts are rejected."""
        with pytest.raises(ValueError, match="count"):
            list(identicon_service.generate_batch(-1))

    def test_fixed_overrides_apply_to_all(self, identicon_service):
        """Test overrides reach every item."""
        icons = list(identicon_service.generate_batch(3, size=3, color="red", width=64))
        assert {(i.options.size, i.options.color, i.options.width) for i in icons} == {
            (3, "red", 64)
        }

    def test_concat(self, identicon_service):
        """Test concat joins every document."""
        icons = list(identicon_service.generate_batch(4))
        document = IdenticonService.concat(icons)

        assert document.count("<svg ") == 4
        assert document.startswith(icons[0].svg)
        assert document.endswith(icons[-1].svg)

    def test_concat_empty(self):
        """Test concat of nothing is empty."""
        assert IdenticonService.concat([]) == ""
